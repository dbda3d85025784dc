"""Exceptions shared by the audit engine and its models."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when markup, stylesheet or result payloads cannot be audited."""
