"""Shared DTOs, error handling and integrations for the medical records services."""

__version__ = "0.1.0"
