"""Core access control model, settings and exceptions."""
