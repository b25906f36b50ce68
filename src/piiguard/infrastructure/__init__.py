"""Infrastructure layer: cryptography and persistence adapters."""
