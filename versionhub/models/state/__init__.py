"""Session and settings state models."""
