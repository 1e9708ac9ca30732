"""Utility helpers for the HireLink app."""
