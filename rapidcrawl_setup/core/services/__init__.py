"""Services — one module per provisioning step."""
