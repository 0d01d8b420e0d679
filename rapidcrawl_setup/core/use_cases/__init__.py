"""Use cases — entry points shared by the CLI and tests."""
