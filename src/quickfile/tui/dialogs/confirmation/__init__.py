"""Confirmation dialog package."""

from .confirmation import ConfirmationDialog

__all__ = ["ConfirmationDialog"]
