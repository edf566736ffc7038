"""Errors raised by the projection engine."""

from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """A precondition on the inputs was violated; nothing was computed."""

    def __init__(self, field: str, message: str, scenario: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.message = message
        self.scenario = scenario

    def to_dict(self) -> dict:
        return {"error": self.message, "field": self.field, "scenario": self.scenario}


def require(condition: bool, field: str, message: str) -> None:
    if not condition:
        raise InvalidInput(field, message)
