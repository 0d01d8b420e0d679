"""Engine — the provisioning state machine and its fallback combinator."""
