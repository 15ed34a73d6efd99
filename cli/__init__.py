"""tmuxl command-line interface."""
