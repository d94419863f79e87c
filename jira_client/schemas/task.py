"""
Task DTO for operations Jira runs in the background.
"""

from typing import Any, Optional

from pydantic import Field

from jira_client.schemas.base import JiraModel


class Task(JiraModel):
    """
    Progress handle of an asynchronous Jira task (e.g. a field deletion).
    """

    self_link: Optional[str] = Field(default=None, alias="self")
    id: Optional[str] = Field(default=None, description="The id of the task.")
    description: Optional[str] = None
    status: Optional[str] = Field(
        default=None, description="ENQUEUED, RUNNING, COMPLETE, FAILED, CANCEL_REQUESTED, CANCELLED or DEAD."
    )
    message: Optional[str] = None
    result: Optional[Any] = Field(default=None, description="The result of the task execution.")
    submitted_by: Optional[int] = None
    progress: Optional[int] = Field(default=None, description="Completion percentage.")
    elapsed_runtime: Optional[int] = None
    submitted: Optional[int] = None
    started: Optional[int] = None
    finished: Optional[int] = None
    last_update: Optional[int] = None
