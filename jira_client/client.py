"""
Jira client entry point.

Wires the transport and the issue field services together:

    async with JiraClient(host, mail, token) as jira:
        fields, response = await jira.fields.gets()
"""

from typing import Optional

import httpx

from jira_client.core.config import Settings, settings as default_settings
from jira_client.core.errors import (
    HostMismatchError,
    NoHostProvidedError,
    NoVersionProvidedError,
)
from jira_client.services.fields import (
    FieldContextOptionService,
    FieldContextService,
    IssueFieldService,
)
from jira_client.services.transport import HttpxTransport, Transport


class JiraClient:
    """
    Client for the issue field family of the Jira REST API.

    Attributes:
        transport: Transport shared by every service.
        fields: Field operations; contexts under fields.context and options
            under fields.context.option.
    """

    def __init__(
        self,
        host: str,
        mail: Optional[str] = None,
        token: Optional[str] = None,
        version: str = "3",
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
        user_agent: str = "jira-client/1.0",
    ):
        """
        Initialize the client.

        Args:
            host: Site URL, e.g. https://example.atlassian.net.
            mail: Account e-mail for basic auth.
            token: API token for basic auth.
            version: REST API version used in every endpoint.
            http_client: Client to send requests with. A client without a base_url
                is pointed at host; one with a different base_url is rejected.
                The caller stays responsible for closing it.
            timeout: Request timeout (seconds) of the client created here.
            user_agent: Value of the User-Agent header.
        """
        if not host:
            raise NoHostProvidedError()
        if not version:
            raise NoVersionProvidedError()

        base_url = host.rstrip("/") + "/"

        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(
                base_url=base_url,
                timeout=httpx.Timeout(timeout),
            )
        elif not str(http_client.base_url):
            http_client.base_url = base_url
        elif str(http_client.base_url).rstrip("/") != host.rstrip("/"):
            raise HostMismatchError(host, str(http_client.base_url))

        self.http_client = http_client
        self.transport: Transport = HttpxTransport(
            http_client, mail=mail, token=token, user_agent=user_agent
        )

        option = FieldContextOptionService(self.transport, version)
        context = FieldContextService(self.transport, version, option=option)
        self.fields = IssueFieldService(self.transport, version, context=context)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "JiraClient":
        """
        Build a client from environment settings (JIRA_HOST, JIRA_MAIL, JIRA_TOKEN, ...).
        """
        settings = settings or default_settings
        token = settings.JIRA_TOKEN.get_secret_value() if settings.JIRA_TOKEN else None

        return cls(
            host=settings.JIRA_HOST,
            mail=settings.JIRA_MAIL,
            token=token,
            version=settings.JIRA_API_VERSION,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            user_agent=settings.USER_AGENT,
        )

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self.http_client.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
