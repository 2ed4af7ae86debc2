"""Zenaton - command-line control of workflow instances.

Find a workflow:
    python -m zenaton find OrderWorkflow --id order-42

Kill, pause or resume it:
    python -m zenaton kill OrderWorkflow --id order-42

Send it an event:
    python -m zenaton send-event OrderWorkflow --id order-42 --event Paid --data '{"amount": 10}'

Credentials come from ZENATON_APP_ID, ZENATON_API_TOKEN and ZENATON_APP_ENV
(environment or .env file).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv


def setup_logging(level: str = "INFO"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Zenaton - control workflow instances")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: ZENATON_LOG_LEVEL env or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (
        ("find", "Find a workflow instance"),
        ("kill", "Kill a workflow instance"),
        ("pause", "Pause a workflow instance"),
        ("resume", "Resume a workflow instance"),
        ("send-event", "Send an event to a workflow instance"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("workflow", help="Workflow name")
        sub.add_argument("--id", required=True, dest="custom_id", help="Custom id")
        if command == "send-event":
            sub.add_argument("--event", required=True, help="Event name")
            sub.add_argument("--data", default="null", help="Event data as JSON")

    return parser


async def run_command(args: argparse.Namespace) -> int:
    """Execute one parsed command against the process-wide client."""
    from .client import get_client
    from .query import WorkflowQuery

    query = WorkflowQuery(args.workflow, args.custom_id, client=get_client())

    if args.command == "find":
        # Printed raw: the workflow class is usually not registered here
        properties = await query.client.find_workflow_properties(
            query.workflow_name, query.custom_id
        )
        if isinstance(properties, str):
            properties = query.client.serializer.decode(properties)
        print(json.dumps(properties, indent=2, default=str))
    elif args.command == "kill":
        await query.kill()
    elif args.command == "pause":
        await query.pause()
    elif args.command == "resume":
        await query.resume()
    elif args.command == "send-event":
        await query.send_event(args.event, json.loads(args.data))
    return 0


def main(argv=None):
    """CLI entry point."""
    load_dotenv()

    from .config import get_config
    from .credentials import init

    args = build_parser().parse_args(argv)
    config = get_config()
    setup_logging(args.log_level or config.log_level)
    logger = logging.getLogger(__name__)

    init(config.app_id, config.api_token, config.app_env)

    try:
        code = asyncio.run(run_command(args))
    except KeyboardInterrupt:
        logger.info("Interrupted")
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    main()
