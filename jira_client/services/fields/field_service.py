"""
Issue field service.

Lists, creates, searches and deletes Jira fields:

- GET    rest/api/{version}/field
- POST   rest/api/{version}/field
- GET    rest/api/{version}/field/search?{query}
- DELETE rest/api/{version}/field/{fieldId}

Every operation returns the parsed result together with the response envelope.
"""

from typing import List, Optional, Tuple, Union

from jira_client.core.errors import NoFieldIDError, NoVersionProvidedError
from jira_client.schemas.field import (
    CustomFieldPayload,
    FieldSearchOptions,
    FieldSearchPage,
    IssueField,
)
from jira_client.schemas.response import ResponseEnvelope
from jira_client.schemas.task import Task
from jira_client.services.fields.context_service import FieldContextService
from jira_client.services.fields.utils import encode_query, pagination, path_segment
from jira_client.services.transport import Transport


def build_search_query(
    options: Optional[FieldSearchOptions], start_at: int, max_results: int
) -> str:
    """
    Build the query string of a field search.

    startAt and maxResults are always present; every other filter is added only
    when non-empty, list filters joined with commas.
    """
    params = pagination(start_at, max_results)

    if options is not None:
        if options.expand:
            params.append(("expand", ",".join(options.expand)))
        if options.types:
            params.append(("type", ",".join(options.types)))
        if options.ids:
            params.append(("id", ",".join(options.ids)))
        if options.order_by:
            params.append(("orderBy", options.order_by))
        if options.query:
            params.append(("query", options.query))

    return encode_query(params)


class IssueFieldService:
    """
    Public field operations. Forwards to an implementation holding the
    transport and API version.

    Attributes:
        context: Service for the contexts of custom fields.
    """

    def __init__(
        self,
        transport: Transport,
        version: str,
        context: Optional[FieldContextService] = None,
    ):
        if not version:
            raise NoVersionProvidedError()

        self._impl = _IssueFieldServiceImpl(transport, version)
        self.context = context

    async def gets(self) -> Tuple[List[IssueField], ResponseEnvelope]:
        """Return every system and custom field."""
        return await self._impl.gets()

    async def create(
        self, payload: Union[CustomFieldPayload, dict]
    ) -> Tuple[IssueField, ResponseEnvelope]:
        """Create a custom field."""
        return await self._impl.create(payload)

    async def search(
        self,
        options: Optional[FieldSearchOptions] = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> Tuple[FieldSearchPage, ResponseEnvelope]:
        """Return a page of fields matching the optional filters."""
        return await self._impl.search(options, start_at, max_results)

    async def delete(self, field_id: str) -> Tuple[Task, ResponseEnvelope]:
        """Delete a custom field. Jira processes the deletion as a background task."""
        return await self._impl.delete(field_id)


class _IssueFieldServiceImpl:
    def __init__(self, transport: Transport, version: str):
        self.transport = transport
        self.version = version

    async def gets(self) -> Tuple[List[IssueField], ResponseEnvelope]:
        endpoint = f"rest/api/{self.version}/field"

        request = self.transport.new_request("GET", endpoint)
        return await self.transport.call(request, List[IssueField])

    async def create(
        self, payload: Union[CustomFieldPayload, dict]
    ) -> Tuple[IssueField, ResponseEnvelope]:
        body = self.transport.serialize(payload)

        endpoint = f"rest/api/{self.version}/field"

        request = self.transport.new_request("POST", endpoint, body)
        return await self.transport.call(request, IssueField)

    async def search(
        self,
        options: Optional[FieldSearchOptions],
        start_at: int,
        max_results: int,
    ) -> Tuple[FieldSearchPage, ResponseEnvelope]:
        query = build_search_query(options, start_at, max_results)
        endpoint = f"rest/api/{self.version}/field/search?{query}"

        request = self.transport.new_request("GET", endpoint)
        return await self.transport.call(request, FieldSearchPage)

    async def delete(self, field_id: str) -> Tuple[Task, ResponseEnvelope]:
        if not field_id:
            raise NoFieldIDError()

        endpoint = f"rest/api/{self.version}/field/{path_segment(field_id)}"

        request = self.transport.new_request("DELETE", endpoint)
        return await self.transport.call(request, Task)
