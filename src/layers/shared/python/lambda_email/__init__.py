"""Shared layer for the send-email Lambda."""

__version__ = "0.1.0"
