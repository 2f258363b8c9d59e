"""Session-scoped services built on the validator."""

from .live_validation import LiveValidationService
from .session_store import StoredValidation, ValidationSessionStore

__all__ = ["LiveValidationService", "StoredValidation", "ValidationSessionStore"]
