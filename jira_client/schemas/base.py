"""
Base model shared by every Jira DTO.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class JiraModel(BaseModel):
    """
    Maps snake_case attributes to the camelCase keys Jira uses on the wire.
    Unknown keys returned by the service are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
