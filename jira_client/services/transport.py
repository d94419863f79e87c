"""
HTTP transport shared by every Jira service.

Builds requests against the configured site, sends them with basic auth and
parses the body into the requested type. The raw response is always wrapped in
a ResponseEnvelope, on success and on failure.
"""

import json
from functools import lru_cache
from typing import Any, Optional, Protocol, Tuple, runtime_checkable

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from jira_client.core.errors import (
    JiraConnectionError,
    JiraDecodeError,
    PayloadSerializationError,
    error_for_status,
)
from jira_client.core.logging import get_logger
from jira_client.schemas.response import ResponseEnvelope

logger = get_logger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Contract the services rely on; tests may substitute their own."""

    def serialize(self, payload: Any) -> bytes: ...

    def new_request(
        self, method: str, endpoint: str, body: Optional[bytes] = None
    ) -> httpx.Request: ...

    async def call(
        self, request: httpx.Request, output_type: Any = None
    ) -> Tuple[Any, ResponseEnvelope]: ...


@lru_cache(maxsize=None)
def _adapter(output_type: Any) -> TypeAdapter:
    return TypeAdapter(output_type)


class HttpxTransport:
    """Transport backed by an httpx.AsyncClient whose base_url is the Jira site."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        mail: Optional[str] = None,
        token: Optional[str] = None,
        user_agent: str = "jira-client/1.0",
    ):
        """
        Initialize the transport.

        Args:
            client: Client used for every round trip. Its base_url must point at the site.
            mail: Account e-mail for basic auth.
            token: API token for basic auth.
            user_agent: Value of the User-Agent header.
        """
        self.client = client
        self.auth = httpx.BasicAuth(mail, token) if mail and token else None
        self.headers = {
            "Accept": "application/json",
            "User-Agent": user_agent,
        }

    def serialize(self, payload: Any) -> bytes:
        """
        Encode a payload as a JSON request body.

        Models are dumped by alias with unset (None) values left out.

        Raises:
            PayloadSerializationError: If the payload cannot be encoded.
        """
        try:
            if isinstance(payload, BaseModel):
                return payload.model_dump_json(by_alias=True, exclude_none=True).encode()
            return json.dumps(payload).encode()
        except (TypeError, ValueError) as e:
            raise PayloadSerializationError(
                f"jira: unable to encode payload: {e}"
            ) from e

    def new_request(
        self, method: str, endpoint: str, body: Optional[bytes] = None
    ) -> httpx.Request:
        """
        Build a request for an endpoint relative to the site root.

        Args:
            method: HTTP verb.
            endpoint: Path such as "rest/api/3/field", query string included.
            body: Encoded JSON body, if any.
        """
        headers = dict(self.headers)
        if body is not None:
            headers["Content-Type"] = "application/json"

        return self.client.build_request(method, endpoint, content=body, headers=headers)

    async def call(
        self, request: httpx.Request, output_type: Any = None
    ) -> Tuple[Any, ResponseEnvelope]:
        """
        Send a request and parse the response body.

        Args:
            request: Request built by new_request.
            output_type: Type the JSON body is parsed into (a model, or e.g.
                List[IssueField]). None skips parsing.

        Returns:
            (parsed value or None when the body is empty, response envelope)

        Raises:
            JiraConnectionError: No response was received.
            JiraRequestError: Non-success status; .response holds the envelope.
            JiraDecodeError: The body does not match output_type.
        """
        send_kwargs = {"follow_redirects": True}
        if self.auth is not None:
            send_kwargs["auth"] = self.auth

        try:
            response = await self.client.send(request, **send_kwargs)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", request.method, request.url, e)
            raise JiraConnectionError(
                f"jira: {request.method} {request.url} failed: {e}"
            ) from e

        envelope = ResponseEnvelope.from_httpx(response)
        logger.debug(
            "%s %s -> %s", envelope.method, envelope.endpoint, envelope.status_code
        )

        if not response.is_success:
            logger.warning(
                "%s %s returned %s: %s",
                envelope.method,
                envelope.endpoint,
                envelope.status_code,
                envelope.text,
            )
            raise error_for_status(envelope)

        if output_type is None or not envelope.body:
            return None, envelope

        try:
            value = _adapter(output_type).validate_json(envelope.body)
        except ValidationError as e:
            raise JiraDecodeError(
                f"jira: unable to decode {envelope.method} {envelope.endpoint} response: {e}",
                envelope,
            ) from e

        return value, envelope
