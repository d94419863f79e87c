"""Unit tests for the field context and context option services."""

import httpx
import pytest

from jira_client.core.errors import (
    NoContextOptionIDError,
    NoFieldContextIDError,
    NoFieldIDError,
    NoVersionProvidedError,
)
from jira_client.schemas import (
    FieldContextOption,
    FieldContextOptionList,
    FieldContextPayload,
    FieldContextSearchOptions,
)
from jira_client.services.fields import FieldContextOptionService, FieldContextService


class TestFieldContextService:
    """Tests for rest/api/3/field/{fieldId}/context."""

    def test_requires_version(self):
        with pytest.raises(NoVersionProvidedError):
            FieldContextService(transport=None, version="")

    @pytest.mark.asyncio
    async def test_gets_with_filters(self, jira, handler):
        handler.respond(
            200,
            {
                "maxResults": 50,
                "startAt": 0,
                "total": 1,
                "isLast": True,
                "values": [
                    {
                        "id": "10180",
                        "name": "Default Configuration Scheme",
                        "isGlobalContext": True,
                        "isAnyIssueType": True,
                    }
                ],
            },
        )
        options = FieldContextSearchOptions(
            is_any_issue_type=True, is_global_context=False, context_ids=[10180, 10181]
        )

        page, response = await jira.fields.context.gets("customfield_10038", options)

        assert page.values[0].id == "10180"
        assert page.values[0].is_global_context is True
        assert response.status_code == 200

        url = handler.last_request.url
        assert url.path == "/rest/api/3/field/customfield_10038/context"
        assert url.params.get_list("contextId") == ["10180", "10181"]
        assert url.params["isAnyIssueType"] == "true"
        assert url.params["isGlobalContext"] == "false"
        assert url.params["startAt"] == "0"
        assert url.params["maxResults"] == "50"

    @pytest.mark.asyncio
    async def test_create(self, jira, handler):
        handler.respond(
            201,
            {"id": "10181", "name": "Bug fields", "projectIds": ["10000"], "issueTypeIds": ["10001"]},
        )
        payload = FieldContextPayload(
            name="Bug fields", project_ids=["10000"], issue_type_ids=["10001"]
        )

        context, response = await jira.fields.context.create("customfield_10038", payload)

        assert context.id == "10181"
        assert context.project_ids == ["10000"]
        assert handler.last_request.method == "POST"
        assert handler.last_json() == {
            "name": "Bug fields",
            "projectIds": ["10000"],
            "issueTypeIds": ["10001"],
        }

    @pytest.mark.asyncio
    async def test_update_returns_envelope(self, jira, handler):
        handler.respond(204, content=b"")

        response = await jira.fields.context.update(
            "customfield_10038", 10181, name="Bug fields (renamed)"
        )

        assert response.status_code == 204
        assert handler.last_request.method == "PUT"
        assert handler.last_request.url.path == "/rest/api/3/field/customfield_10038/context/10181"
        assert handler.last_json() == {"name": "Bug fields (renamed)"}

    @pytest.mark.asyncio
    async def test_delete(self, jira, handler):
        handler.respond(204, content=b"")

        response = await jira.fields.context.delete("customfield_10038", 10181)

        assert response.status_code == 204
        assert handler.last_request.method == "DELETE"

    @pytest.mark.asyncio
    async def test_preconditions(self, jira, handler):
        with pytest.raises(NoFieldIDError):
            await jira.fields.context.gets("")
        with pytest.raises(NoFieldContextIDError):
            await jira.fields.context.delete("customfield_10038", 0)
        with pytest.raises(NoFieldContextIDError):
            await jira.fields.context.delete("customfield_10038", None)
        with pytest.raises(NoFieldContextIDError):
            await jira.fields.context.update("customfield_10038", None, name="x")
        with pytest.raises(NoFieldContextIDError):
            await jira.fields.context.update("customfield_10038", 0, name="x")

        assert handler.requests == []


class TestFieldContextOptionService:
    """Tests for rest/api/3/field/{fieldId}/context/{contextId}/option."""

    def test_requires_version(self):
        with pytest.raises(NoVersionProvidedError):
            FieldContextOptionService(transport=None, version="")

    @pytest.mark.asyncio
    async def test_gets(self, jira, handler):
        handler.respond(
            200,
            {
                "total": 2,
                "values": [
                    {"id": "10064", "value": "Option 3", "disabled": False},
                    {"id": "10065", "value": "Option 4", "disabled": True},
                ],
            },
        )

        page, _ = await jira.fields.context.option.gets(
            "customfield_10038", 10180, only_options=True
        )

        assert [o.value for o in page.values] == ["Option 3", "Option 4"]
        assert page.values[1].disabled is True

        url = handler.last_request.url
        assert url.path == "/rest/api/3/field/customfield_10038/context/10180/option"
        assert url.params["onlyOptions"] == "true"
        assert "optionId" not in url.params

    @pytest.mark.asyncio
    async def test_gets_single_option(self, jira, handler):
        handler.respond(200, {"values": [{"id": "10064", "value": "Option 3"}]})

        page, _ = await jira.fields.context.option.gets("customfield_10038", 10180, option_id=10064)

        assert page.values[0].id == "10064"
        assert handler.last_request.url.params["optionId"] == "10064"

    @pytest.mark.asyncio
    async def test_update(self, jira, handler):
        handler.respond_with(
            lambda request: httpx.Response(200, content=request.content)
        )
        payload = FieldContextOptionList(
            options=[
                FieldContextOption(id="10064", value="Option 3 - Updated"),
                FieldContextOption(id="10065", value="Option 4 - Updated", disabled=True),
            ]
        )

        options, response = await jira.fields.context.option.update(
            "customfield_10038", 10180, payload
        )

        assert options == payload
        assert response.status_code == 200
        assert handler.last_request.method == "PUT"
        assert handler.last_json() == {
            "options": [
                {"id": "10064", "value": "Option 3 - Updated", "disabled": False},
                {"id": "10065", "value": "Option 4 - Updated", "disabled": True},
            ]
        }

    @pytest.mark.asyncio
    async def test_create_cascading_option(self, jira, handler):
        handler.respond(200, {"options": [{"id": "10070", "value": "Uruguay", "optionId": "1027"}]})
        payload = FieldContextOptionList(
            options=[FieldContextOption(value="Uruguay", option_id="1027")]
        )

        options, _ = await jira.fields.context.option.create("customfield_10038", 10180, payload)

        assert options.options[0].option_id == "1027"
        assert handler.last_request.method == "POST"
        assert handler.last_json() == {
            "options": [{"value": "Uruguay", "optionId": "1027", "disabled": False}]
        }

    @pytest.mark.asyncio
    async def test_delete(self, jira, handler):
        handler.respond(204, content=b"")

        response = await jira.fields.context.option.delete("customfield_10038", 10180, 10064)

        assert response.status_code == 204
        assert (
            handler.last_request.url.path
            == "/rest/api/3/field/customfield_10038/context/10180/option/10064"
        )

    @pytest.mark.asyncio
    async def test_preconditions(self, jira, handler):
        option = jira.fields.context.option

        with pytest.raises(NoFieldIDError):
            await option.gets("", 10180)
        with pytest.raises(NoFieldContextIDError):
            await option.update("customfield_10038", 0, FieldContextOptionList())
        with pytest.raises(NoContextOptionIDError):
            await option.delete("customfield_10038", 10180, 0)
        with pytest.raises(NoContextOptionIDError):
            await option.gets("customfield_10038", 10180, option_id=0)

        assert handler.requests == []
