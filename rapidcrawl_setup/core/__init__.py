"""Core — models, services, and the setup pipeline engine."""
