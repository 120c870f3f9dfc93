"""Application composition: adapter wiring and the command-line entry point."""
