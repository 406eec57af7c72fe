"""Runtime configuration, logging and application wiring."""
