"""Core package for HireLink errors and patterns."""

from .errors import HireLinkError

__all__ = ["HireLinkError"]
