"""
Issue field DTOs: field records, create payloads and search pages.
"""

from typing import Any, Dict, List, Optional

from pydantic import Field

from jira_client.schemas.base import JiraModel


class FieldSchema(JiraModel):
    """
    Data type description of a field.
    """

    type: Optional[str] = Field(default=None, description="The data type of the field.")
    items: Optional[str] = Field(
        default=None, description="When the type is array, the type of its items."
    )
    system: Optional[str] = Field(
        default=None, description="The system field this schema describes."
    )
    custom: Optional[str] = Field(
        default=None, description="The custom field type key."
    )
    custom_id: Optional[int] = Field(
        default=None, description="The numeric id of the custom field."
    )


class FieldScope(JiraModel):
    type: Optional[str] = Field(default=None, description="The scope type.")
    project: Optional[Dict[str, Any]] = Field(
        default=None, description="The project the field is scoped to."
    )


class FieldLastUsed(JiraModel):
    type: Optional[str] = Field(default=None, description="TRACKED, NOT_TRACKED or NO_INFORMATION.")
    value: Optional[str] = Field(default=None, description="Last time the field was used.")


class IssueField(JiraModel):
    """
    A system or custom field as returned by Jira.
    """

    id: Optional[str] = Field(default=None, description="The id of the field.")
    key: Optional[str] = Field(default=None, description="The key of the field.")
    name: Optional[str] = Field(default=None, description="The name of the field.")
    custom: Optional[bool] = Field(
        default=None, description="Whether the field is a custom field."
    )
    orderable: Optional[bool] = Field(
        default=None, description="Whether the content of the field can be used to order lists."
    )
    navigable: Optional[bool] = Field(
        default=None, description="Whether the field can be used as a column on the issue navigator."
    )
    searchable: Optional[bool] = Field(
        default=None, description="Whether the content of the field can be searched."
    )
    clause_names: List[str] = Field(
        default_factory=list, description="The names that can be used to reference the field in JQL."
    )
    scope: Optional[FieldScope] = Field(
        default=None, description="The scope of the field."
    )
    schema_: Optional[FieldSchema] = Field(
        default=None, alias="schema", description="The data schema for the field."
    )
    description: Optional[str] = Field(
        default=None, description="The description of the field."
    )
    is_locked: Optional[bool] = Field(
        default=None, description="Whether the field is locked."
    )
    searcher_key: Optional[str] = Field(
        default=None, description="The searcher key of the field."
    )
    last_used: Optional[FieldLastUsed] = Field(
        default=None, description="Information about the most recent use of the field."
    )


class CustomFieldPayload(JiraModel):
    """
    Payload for creating a custom field.
    """

    name: str = Field(description="The name of the custom field.")
    description: Optional[str] = Field(
        default=None, description="The description of the custom field."
    )
    type: str = Field(
        description="The type key, e.g. com.atlassian.jira.plugin.system.customfieldtypes:select."
    )
    searcher_key: Optional[str] = Field(
        default=None, description="The searcher key, e.g. ...customfieldtypes:multiselectsearcher."
    )


class FieldSearchOptions(JiraModel):
    """
    Optional criteria for a paginated field search.

    Empty values are left out of the query string.
    """

    expand: List[str] = Field(default_factory=list)
    types: List[str] = Field(default_factory=list, description="custom and/or system.")
    ids: List[str] = Field(default_factory=list)
    order_by: str = Field(default="", description="contextsCount, lastUsed, name or screensCount.")
    query: str = Field(default="", description="Matched against field names and descriptions.")


class FieldSearchPage(JiraModel):
    """
    One page of a paginated field search.
    """

    self_link: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: Optional[int] = None
    start_at: Optional[int] = None
    total: Optional[int] = None
    is_last: Optional[bool] = None
    values: List[IssueField] = Field(default_factory=list)
