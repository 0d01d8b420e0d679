"""UI — terminal output and prompt sources."""
