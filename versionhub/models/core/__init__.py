"""Core inventory models."""
