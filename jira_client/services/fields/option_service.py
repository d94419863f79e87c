"""
Custom field context option service.

Manages the options offered by select, multi-select and cascading fields
within one of their contexts.
"""

from typing import Optional, Tuple, Union

from jira_client.core.errors import (
    NoContextOptionIDError,
    NoFieldContextIDError,
    NoFieldIDError,
    NoVersionProvidedError,
)
from jira_client.schemas.field_context import (
    FieldContextOptionList,
    FieldContextOptionPage,
)
from jira_client.schemas.response import ResponseEnvelope
from jira_client.services.fields.utils import encode_query, pagination, path_segment
from jira_client.services.transport import Transport


class FieldContextOptionService:
    """Operations on rest/api/{version}/field/{fieldId}/context/{contextId}/option."""

    def __init__(self, transport: Transport, version: str):
        if not version:
            raise NoVersionProvidedError()

        self.transport = transport
        self.version = version

    def _endpoint(self, field_id: str, context_id: int) -> str:
        if not field_id:
            raise NoFieldIDError()
        if not context_id:
            raise NoFieldContextIDError()

        return (
            f"rest/api/{self.version}/field/{path_segment(field_id)}"
            f"/context/{path_segment(context_id)}/option"
        )

    async def gets(
        self,
        field_id: str,
        context_id: int,
        option_id: Optional[int] = None,
        only_options: bool = False,
        start_at: int = 0,
        max_results: int = 50,
    ) -> Tuple[FieldContextOptionPage, ResponseEnvelope]:
        """
        Return a page of the options of a context.

        Args:
            field_id: Id of the custom field.
            context_id: Id of the context.
            option_id: Only return this option. None returns every option.
            only_options: Skip cascading child options.
            start_at: Index of the first item to return.
            max_results: Page size.
        """
        endpoint = self._endpoint(field_id, context_id)
        params = pagination(start_at, max_results)

        if option_id is not None:
            if not option_id:
                raise NoContextOptionIDError()
            params.append(("optionId", str(option_id)))
        if only_options:
            params.append(("onlyOptions", "true"))

        request = self.transport.new_request("GET", f"{endpoint}?{encode_query(params)}")
        return await self.transport.call(request, FieldContextOptionPage)

    async def create(
        self,
        field_id: str,
        context_id: int,
        payload: Union[FieldContextOptionList, dict],
    ) -> Tuple[FieldContextOptionList, ResponseEnvelope]:
        """Add options to a context."""
        endpoint = self._endpoint(field_id, context_id)
        body = self.transport.serialize(payload)

        request = self.transport.new_request("POST", endpoint, body)
        return await self.transport.call(request, FieldContextOptionList)

    async def update(
        self,
        field_id: str,
        context_id: int,
        payload: Union[FieldContextOptionList, dict],
    ) -> Tuple[FieldContextOptionList, ResponseEnvelope]:
        """Rename, enable or disable existing options. Options are matched by id."""
        endpoint = self._endpoint(field_id, context_id)
        body = self.transport.serialize(payload)

        request = self.transport.new_request("PUT", endpoint, body)
        return await self.transport.call(request, FieldContextOptionList)

    async def delete(
        self, field_id: str, context_id: int, option_id: int
    ) -> ResponseEnvelope:
        endpoint = self._endpoint(field_id, context_id)
        if not option_id:
            raise NoContextOptionIDError()

        request = self.transport.new_request(
            "DELETE", f"{endpoint}/{path_segment(option_id)}"
        )
        _, response = await self.transport.call(request)
        return response
