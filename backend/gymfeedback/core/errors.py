from __future__ import annotations
from typing import Any, Dict, List, Optional


class FeedbackAppError(Exception):
    """Base class for every error raised by the feedback backend."""


class ConfigurationError(FeedbackAppError):
    """Required settings (Supabase endpoint / key) are missing. Fatal at startup."""


class PersistenceError(FeedbackAppError):
    """A read or write against the hosted database failed.

    The underlying httpx exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        table: Optional[str] = None,
        operation: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.table = table
        self.operation = operation
        self.status_code = status_code


class ValidationError(FeedbackAppError):
    """A submission is missing a required field. Raised before any network call."""

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) or "payload" for e in errors)
        super().__init__(f"invalid submission: {fields}")

    @classmethod
    def from_pydantic(cls, exc) -> "ValidationError":
        return cls(
            [{"loc": tuple(e["loc"]), "msg": e["msg"], "type": e["type"]} for e in exc.errors()]
        )
