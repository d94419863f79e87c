"""
Response envelope returned alongside every typed result.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx


@dataclass(frozen=True)
class ResponseEnvelope:
    """
    Metadata and raw body of one HTTP round trip.

    Kept even when the call fails so the raw bytes Jira sent back can be logged.
    """

    status_code: int
    endpoint: str
    method: str
    body: bytes = b""
    raw: Optional[httpx.Response] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> "ResponseEnvelope":
        return cls(
            status_code=response.status_code,
            endpoint=str(response.request.url),
            method=response.request.method,
            body=response.content,
            raw=response,
        )

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body) if self.body else None
