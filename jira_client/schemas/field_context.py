"""
Custom field context and context option DTOs.
"""

from typing import List, Optional

from pydantic import Field

from jira_client.schemas.base import JiraModel


class FieldContext(JiraModel):
    """
    A custom field context.
    """

    id: Optional[str] = Field(default=None, description="The id of the context.")
    name: Optional[str] = Field(default=None, description="The name of the context.")
    description: Optional[str] = None
    is_global_context: Optional[bool] = Field(
        default=None, description="Whether the context is global."
    )
    is_any_issue_type: Optional[bool] = Field(
        default=None, description="Whether the context applies to all issue types."
    )
    project_ids: List[str] = Field(default_factory=list)
    issue_type_ids: List[str] = Field(default_factory=list)


class FieldContextPage(JiraModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: Optional[int] = None
    start_at: Optional[int] = None
    total: Optional[int] = None
    is_last: Optional[bool] = None
    values: List[FieldContext] = Field(default_factory=list)


class FieldContextSearchOptions(JiraModel):
    """
    Optional filters for listing the contexts of a field.
    """

    is_any_issue_type: Optional[bool] = None
    is_global_context: Optional[bool] = None
    context_ids: List[int] = Field(default_factory=list)


class FieldContextPayload(JiraModel):
    """
    Payload for creating a field context.

    Empty project or issue type lists create a global context for all issue types.
    """

    name: str
    description: Optional[str] = None
    project_ids: List[str] = Field(default_factory=list)
    issue_type_ids: List[str] = Field(default_factory=list)


class FieldContextUpdatePayload(JiraModel):
    name: Optional[str] = None
    description: Optional[str] = None


class FieldContextOption(JiraModel):
    """
    An option of a select-style custom field context.

    option_id links a child option to its parent in cascading fields.
    """

    id: Optional[str] = None
    value: Optional[str] = None
    option_id: Optional[str] = None
    disabled: bool = False


class FieldContextOptionList(JiraModel):
    options: List[FieldContextOption] = Field(default_factory=list)


class FieldContextOptionPage(JiraModel):
    self_link: Optional[str] = Field(default=None, alias="self")
    next_page: Optional[str] = None
    max_results: Optional[int] = None
    start_at: Optional[int] = None
    total: Optional[int] = None
    is_last: Optional[bool] = None
    values: List[FieldContextOption] = Field(default_factory=list)
