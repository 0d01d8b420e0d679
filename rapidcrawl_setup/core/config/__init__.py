"""Configuration — setup settings file loading."""
