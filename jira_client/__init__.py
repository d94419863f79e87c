"""
Async client for the Jira REST API issue field endpoints.
"""

import logging

from jira_client.client import JiraClient
from jira_client.core.errors import (
    JiraConnectionError,
    JiraDecodeError,
    JiraError,
    JiraPreconditionError,
    JiraRequestError,
    NoFieldIDError,
    PayloadSerializationError,
)
from jira_client.schemas.response import ResponseEnvelope

__all__ = [
    "JiraClient",
    "JiraConnectionError",
    "JiraDecodeError",
    "JiraError",
    "JiraPreconditionError",
    "JiraRequestError",
    "NoFieldIDError",
    "PayloadSerializationError",
    "ResponseEnvelope",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
