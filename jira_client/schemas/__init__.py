"""
Schema and DTO package.
"""

from jira_client.schemas.field import (
    CustomFieldPayload,
    FieldSchema,
    FieldScope,
    FieldSearchOptions,
    FieldSearchPage,
    IssueField,
)
from jira_client.schemas.field_context import (
    FieldContext,
    FieldContextOption,
    FieldContextOptionList,
    FieldContextOptionPage,
    FieldContextPage,
    FieldContextPayload,
    FieldContextSearchOptions,
    FieldContextUpdatePayload,
)
from jira_client.schemas.response import ResponseEnvelope
from jira_client.schemas.task import Task

__all__ = [
    "CustomFieldPayload",
    "FieldContext",
    "FieldContextOption",
    "FieldContextOptionList",
    "FieldContextOptionPage",
    "FieldContextPage",
    "FieldContextPayload",
    "FieldContextSearchOptions",
    "FieldContextUpdatePayload",
    "FieldSchema",
    "FieldScope",
    "FieldSearchOptions",
    "FieldSearchPage",
    "IssueField",
    "ResponseEnvelope",
    "Task",
]
