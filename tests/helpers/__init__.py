"""Shared builders for ESTree test fixtures."""

__all__ = ["estree"]
