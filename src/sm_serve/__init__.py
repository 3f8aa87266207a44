"""sm-serve command-line entry point."""
