"""
Request errors raised by the parser and the variants.

RequestParseError is the client-facing failure (HTTP 400). It carries the
kind of failure and the values needed to describe it; the user-visible text
is rendered in one place, by RequestParseError.message.
"""

from enum import Enum
from typing import Optional

from dewpoint.engine.formatting import format_number


class ErrorKind(str, Enum):
    WRONG_ROUTE = "wrong_route"
    MISSING_FIELD = "missing_field"
    INVALID_NUMBER = "invalid_number"
    OUT_OF_RANGE = "out_of_range"


class RequestParseError(ValueError):
    """A request line that cannot be turned into a validated reading."""

    def __init__(
        self,
        kind: ErrorKind,
        *,
        field: Optional[str] = None,
        raw: Optional[str] = None,
        value: Optional[float] = None,
        bound: Optional[float] = None,
        upper: bool = False,
        route: Optional[str] = None,
        usage: Optional[str] = None,
    ):
        self.kind = kind
        self.field = field
        self.raw = raw
        self.value = value
        self.bound = bound
        self.upper = upper
        self.route = route
        self.usage = usage
        super().__init__(self.message)

    @classmethod
    def wrong_route(cls, route: str) -> "RequestParseError":
        return cls(ErrorKind.WRONG_ROUTE, route=route)

    @classmethod
    def missing_field(cls, usage: str) -> "RequestParseError":
        return cls(ErrorKind.MISSING_FIELD, usage=usage)

    @classmethod
    def invalid_number(cls, field: str, raw: str) -> "RequestParseError":
        return cls(ErrorKind.INVALID_NUMBER, field=field, raw=raw)

    @classmethod
    def too_high(cls, field: str, value: float, bound: float) -> "RequestParseError":
        return cls(ErrorKind.OUT_OF_RANGE, field=field, value=value, bound=bound, upper=True)

    @classmethod
    def too_low(cls, field: str, value: float, bound: float) -> "RequestParseError":
        return cls(ErrorKind.OUT_OF_RANGE, field=field, value=value, bound=bound, upper=False)

    @property
    def message(self) -> str:
        if self.kind == ErrorKind.WRONG_ROUTE:
            return f"Only GET to {self.route} is allowed!"
        if self.kind == ErrorKind.MISSING_FIELD:
            return f"t or rh is missing! Request must be {self.usage}"
        if self.kind == ErrorKind.INVALID_NUMBER:
            return f"Cannot convert {self.field} to a float! Got '{self.raw}'!"

        direction, limit = ("high", "Max") if self.upper else ("low", "Min")
        return (
            f"{self.field} is too {direction}! Got '{format_number(self.value)}'! "
            f"{limit} allowed {self.field} is {format_number(self.bound)}!"
        )


class MalformedRequestLine(Exception):
    """The request line has no path token at all."""

    def __init__(self, line: str):
        self.line = line
        super().__init__("Malformed request line!")
