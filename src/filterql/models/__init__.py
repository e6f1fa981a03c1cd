"""Caller-facing data models for filterql."""

from filterql.models.query import Query

__all__ = ["Query"]
