"""
Pydantic model for an HTTP response produced by the request pipeline.
"""

from pydantic import BaseModel, ConfigDict, Field

from dewpoint.config import STATUS_REASONS


class HttpResponse(BaseModel):
    """Status code and body; framing is rendered by to_bytes()."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(..., description="HTTP status code")
    body: str = Field(..., description="Response body, JSON-like text")

    @property
    def reason(self) -> str:
        # Unmapped codes share the 500 reason text
        return STATUS_REASONS.get(self.status_code, STATUS_REASONS[500])

    @property
    def content_length(self) -> int:
        return len(self.body.encode("utf-8"))

    def to_bytes(self) -> bytes:
        """Render status line, Content-Length header, blank line and body."""
        return (
            f"HTTP/1.1 {self.status_code} {self.reason}\r\n"
            f"Content-Length: {self.content_length}\r\n"
            f"\r\n"
            f"{self.body}"
        ).encode("utf-8")
