"""Orchestration for coordinating services."""

from .lookup_session import LookupSession

__all__ = ["LookupSession"]
