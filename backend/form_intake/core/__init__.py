"""Core domain types, models and constants for the form-intake service."""
