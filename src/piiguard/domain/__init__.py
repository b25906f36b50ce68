"""Domain layer: user records, security contracts and shared exceptions."""
