"""
Custom field context service.

Contexts restrict which projects and issue types a custom field applies to.
"""

from typing import Optional, Tuple, Union

from jira_client.core.errors import (
    NoFieldContextIDError,
    NoFieldIDError,
    NoVersionProvidedError,
)
from jira_client.schemas.field_context import (
    FieldContext,
    FieldContextPage,
    FieldContextPayload,
    FieldContextSearchOptions,
    FieldContextUpdatePayload,
)
from jira_client.schemas.response import ResponseEnvelope
from jira_client.services.fields.option_service import FieldContextOptionService
from jira_client.services.fields.utils import encode_query, pagination, path_segment
from jira_client.services.transport import Transport


class FieldContextService:
    """
    Operations on rest/api/{version}/field/{fieldId}/context.

    Attributes:
        option: Service for the options of a context.
    """

    def __init__(
        self,
        transport: Transport,
        version: str,
        option: Optional[FieldContextOptionService] = None,
    ):
        if not version:
            raise NoVersionProvidedError()

        self.transport = transport
        self.version = version
        self.option = option

    def _collection_endpoint(self, field_id: str) -> str:
        if not field_id:
            raise NoFieldIDError()

        return f"rest/api/{self.version}/field/{path_segment(field_id)}/context"

    def _context_endpoint(self, field_id: str, context_id: int) -> str:
        endpoint = self._collection_endpoint(field_id)
        if not context_id:
            raise NoFieldContextIDError()

        return f"{endpoint}/{path_segment(context_id)}"

    async def gets(
        self,
        field_id: str,
        options: Optional[FieldContextSearchOptions] = None,
        start_at: int = 0,
        max_results: int = 50,
    ) -> Tuple[FieldContextPage, ResponseEnvelope]:
        """
        Return a page of the contexts defined for a custom field.

        Args:
            field_id: Id of the custom field, e.g. customfield_10038.
            options: Optional issue type / global / context id filters.
            start_at: Index of the first item to return.
            max_results: Page size.
        """
        endpoint = self._collection_endpoint(field_id)
        params = pagination(start_at, max_results)

        if options is not None:
            if options.is_any_issue_type is not None:
                params.append(("isAnyIssueType", str(options.is_any_issue_type).lower()))
            if options.is_global_context is not None:
                params.append(("isGlobalContext", str(options.is_global_context).lower()))
            for context_id in options.context_ids:
                params.append(("contextId", str(context_id)))

        request = self.transport.new_request("GET", f"{endpoint}?{encode_query(params)}")
        return await self.transport.call(request, FieldContextPage)

    async def create(
        self, field_id: str, payload: Union[FieldContextPayload, dict]
    ) -> Tuple[FieldContext, ResponseEnvelope]:
        """Create a context for a custom field."""
        endpoint = self._collection_endpoint(field_id)
        body = self.transport.serialize(payload)

        request = self.transport.new_request("POST", endpoint, body)
        return await self.transport.call(request, FieldContext)

    async def update(
        self,
        field_id: str,
        context_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> ResponseEnvelope:
        """Rename a context or change its description."""
        endpoint = self._context_endpoint(field_id, context_id)
        body = self.transport.serialize(
            FieldContextUpdatePayload(name=name, description=description)
        )

        request = self.transport.new_request("PUT", endpoint, body)
        _, response = await self.transport.call(request)
        return response

    async def delete(self, field_id: str, context_id: int) -> ResponseEnvelope:
        endpoint = self._context_endpoint(field_id, context_id)

        request = self.transport.new_request("DELETE", endpoint)
        _, response = await self.transport.call(request)
        return response
