"""Single-user command-line task tracker."""
