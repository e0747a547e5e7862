"""Helm Version Hub - operator inventory of deployed applications and their upgrade versions."""

__version__ = "0.1.0"
