"""Presentation layer for the accounts bounded context."""

from accounts.presentation.routes import router

__all__ = ["router"]
