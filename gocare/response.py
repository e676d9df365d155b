"""Envelopes for successful JSON responses."""

from __future__ import annotations

from typing import Any


def success_response(data: Any, paging: Any) -> dict[str, Any]:
    """A response body with data and, when given, paging information."""
    body: dict[str, Any] = {"data": data}
    if paging is not None:
        body["paging"] = paging
    return body


def simple_success_response(data: Any) -> dict[str, Any]:
    """A response body holding only data."""
    return {"data": data}