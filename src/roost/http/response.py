"""The rendered result of one request.

``App.handle`` returns one of these; the WSGI adapter turns it into a
status line, a header list and a single body chunk.
"""

from dataclasses import dataclass, replace
from http import HTTPStatus

HTML = "text/html; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """Body, status and extra headers of a dispatched request.

    Frozen; ``with_status`` and ``with_header`` return modified copies.
    """

    body: str = ""
    status: int = 200
    content_type: str = HTML
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> "Response":
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        return replace(self, headers=self.headers + ((name, value),))

    @property
    def text(self) -> str:
        return self.body

    @property
    def status_line(self) -> str:
        """WSGI status line, e.g. ``"404 NOT FOUND"``."""
        try:
            reason = HTTPStatus(self.status).phrase.upper()
        except ValueError:
            reason = "UNKNOWN"
        return f"{self.status} {reason}"

    def encode(self) -> bytes:
        return self.body.encode()

    def wsgi_headers(self) -> list[tuple[str, str]]:
        """Headers for ``start_response``; Content-Type and Content-Length first."""
        payload = self.encode()
        return [
            ("Content-Type", self.content_type),
            ("Content-Length", str(len(payload))),
            *self.headers,
        ]
