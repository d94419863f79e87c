"""
Exception hierarchy for the Jira client.

Precondition and serialization errors are raised before any request is sent.
Request errors are raised after a round trip and carry the response envelope
(when one exists) so callers can inspect the raw body Jira returned.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from jira_client.schemas.response import ResponseEnvelope


class JiraError(Exception):
    """Base class for every error raised by the client."""


class JiraPreconditionError(JiraError, ValueError):
    """A required argument or configuration value is missing."""


class NoHostProvidedError(JiraPreconditionError):
    def __init__(self) -> None:
        super().__init__("jira: no host provided")


class HostMismatchError(JiraPreconditionError):
    def __init__(self, host: str, base_url: str) -> None:
        super().__init__(
            f"jira: host {host} does not match http client base_url {base_url}"
        )


class NoVersionProvidedError(JiraPreconditionError):
    def __init__(self) -> None:
        super().__init__("jira: no api version provided")


class NoFieldIDError(JiraPreconditionError):
    def __init__(self) -> None:
        super().__init__("jira: no field id set")


class NoFieldContextIDError(JiraPreconditionError):
    def __init__(self) -> None:
        super().__init__("jira: no field context id set")


class NoContextOptionIDError(JiraPreconditionError):
    def __init__(self) -> None:
        super().__init__("jira: no field context option id set")


class PayloadSerializationError(JiraError):
    """The request payload could not be encoded as JSON."""


class JiraRequestError(JiraError):
    """
    A round trip failed.

    Attributes:
        response: Envelope of the HTTP response, or None when no response
            was received (e.g. connection failure).
    """

    def __init__(
        self, message: str, response: Optional["ResponseEnvelope"] = None
    ) -> None:
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code if self.response is not None else None


class JiraConnectionError(JiraRequestError):
    """The request never produced an HTTP response."""


class JiraDecodeError(JiraRequestError):
    """The response body could not be parsed into the expected type."""


class JiraBadRequestError(JiraRequestError):
    pass


class JiraUnauthorizedError(JiraRequestError):
    pass


class JiraForbiddenError(JiraRequestError):
    pass


class JiraNotFoundError(JiraRequestError):
    pass


class JiraServerError(JiraRequestError):
    pass


_STATUS_ERRORS = {
    400: JiraBadRequestError,
    401: JiraUnauthorizedError,
    403: JiraForbiddenError,
    404: JiraNotFoundError,
}


def error_for_status(response: "ResponseEnvelope") -> JiraRequestError:
    """
    Build the request error matching a non-success response.

    Args:
        response: Envelope of the failed response.

    Returns:
        A JiraRequestError subclass instance carrying the envelope.
    """
    if response.status_code >= 500:
        error_cls = JiraServerError
    else:
        error_cls = _STATUS_ERRORS.get(response.status_code, JiraRequestError)

    message = (
        f"jira: {response.method} {response.endpoint} "
        f"returned status {response.status_code}"
    )
    return error_cls(message, response)
