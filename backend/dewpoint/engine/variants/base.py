"""
Abstract base class for endpoint variants.

A variant fixes the path grammar (where t and rh sit in the request path),
the usage text shown when a segment is missing, and the success body shape.
Number parsing and range checks are shared and live in request_parser.
"""

from abc import ABC, abstractmethod

from dewpoint.engine.errors import MalformedRequestLine, RequestParseError
from dewpoint.models.reading import TemperatureHumidity


class EndpointVariant(ABC):
    """Base class for all endpoint variants."""

    #: Path pattern quoted in the missing-field message
    usage: str = ""

    #: Positions of t and rh in path.split("/")
    t_index: int = 1
    rh_index: int = 2

    @staticmethod
    def request_path(request_line: str) -> str:
        """Second space-separated token of the request line."""
        tokens = request_line.split(" ")
        if len(tokens) < 2:
            raise MalformedRequestLine(request_line)
        return tokens[1]

    def check_route(self, request_line: str) -> None:
        """Reject request lines this variant does not serve. Default: accept all."""

    def extract_fields(self, request_line: str) -> tuple[str, str]:
        """Return the raw (t, rh) path segments, unparsed."""
        self.check_route(request_line)
        segments = self.request_path(request_line).split("/")
        if len(segments) <= max(self.t_index, self.rh_index):
            raise RequestParseError.missing_field(self.usage)
        return segments[self.t_index], segments[self.rh_index]

    @abstractmethod
    def success_body(self, reading: TemperatureHumidity) -> str:
        """Compute the derived quantities and render the 200 body."""
        ...
