"""Shared constants for session keys."""
