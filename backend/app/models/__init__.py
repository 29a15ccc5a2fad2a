"""
Pydantic models for database documents.
"""
from app.models.profile import ProfileRecord

__all__ = ["ProfileRecord"]
