"""Core: domain models, settings and the dialog service."""
