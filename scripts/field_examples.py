"""
Example program exercising the issue field endpoints.

Reads JIRA_HOST, JIRA_MAIL and JIRA_TOKEN from the environment or a .env file.

Usage:
    python scripts/field_examples.py gets
    python scripts/field_examples.py search --query priority --type custom
    python scripts/field_examples.py create "Release train" com.atlassian.jira.plugin.system.customfieldtypes:select
    python scripts/field_examples.py delete customfield_10038
    python scripts/field_examples.py update-options customfield_10038 10180
"""

import argparse
import asyncio

from dotenv import load_dotenv

from jira_client import JiraClient, JiraRequestError
from jira_client.core.config import Settings
from jira_client.core.logging import get_logger, setup_logging
from jira_client.schemas import (
    CustomFieldPayload,
    FieldContextOption,
    FieldContextOptionList,
    FieldSearchOptions,
)

logger = get_logger(__name__)


async def run(args: argparse.Namespace) -> None:
    async with JiraClient.from_settings(Settings()) as jira:
        try:
            if args.command == "gets":
                fields, response = await jira.fields.gets()
                for field in fields:
                    logger.info("%s %s", field.id, field.name)

            elif args.command == "search":
                options = FieldSearchOptions(
                    types=args.type or [], query=args.query or "", order_by="lastUsed"
                )
                page, response = await jira.fields.search(options, 0, args.max_results)
                logger.info("Total fields: %s", page.total)
                for field in page.values:
                    logger.info("%s %s", field.id, field.name)

            elif args.command == "create":
                payload = CustomFieldPayload(
                    name=args.name,
                    description=args.description,
                    type=args.field_type,
                    searcher_key=args.searcher_key,
                )
                field, response = await jira.fields.create(payload)
                logger.info("Created field %s", field.id)

            elif args.command == "delete":
                task, response = await jira.fields.delete(args.field_id)
                logger.info("Task %s is %s", task.id, task.status)

            elif args.command == "update-options":
                payload = FieldContextOptionList(
                    options=[
                        FieldContextOption(id="10064", value="Option 3 - Updated"),
                        FieldContextOption(id="10065", value="Option 4 - Updated", disabled=True),
                    ]
                )
                options, response = await jira.fields.context.option.update(
                    args.field_id, args.context_id, payload
                )
                for option in options.options:
                    logger.info("%s", option)

        except JiraRequestError as e:
            if e.response is not None:
                logger.error("Response HTTP Response %s", e.response.text)
            raise

        logger.info("Response HTTP Code %s", response.status_code)
        logger.info("HTTP Endpoint Used %s", response.endpoint)


def main() -> None:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Jira issue field examples")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("gets")

    search = sub.add_parser("search")
    search.add_argument("--query")
    search.add_argument("--type", action="append", choices=["custom", "system"])
    search.add_argument("--max-results", type=int, default=50)

    create = sub.add_parser("create")
    create.add_argument("name")
    create.add_argument("field_type")
    create.add_argument("--description")
    create.add_argument("--searcher-key")

    delete = sub.add_parser("delete")
    delete.add_argument("field_id")

    update_options = sub.add_parser("update-options")
    update_options.add_argument("field_id")
    update_options.add_argument("context_id", type=int)

    args = parser.parse_args()

    setup_logging(Settings().LOG_LEVEL)
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
