"""PIIGuard - user registration and login with PII encrypted at rest."""
