"""
Issue field services.
"""

from jira_client.services.fields.context_service import FieldContextService
from jira_client.services.fields.field_service import IssueFieldService
from jira_client.services.fields.option_service import FieldContextOptionService

__all__ = [
    "FieldContextOptionService",
    "FieldContextService",
    "IssueFieldService",
]
