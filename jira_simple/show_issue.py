#!/usr/bin/env python3
"""
Print one Jira issue, with description and comments, to the terminal.

Usage:
    jira-show-issue LB-8421
"""
import argparse
import sys
from typing import Optional

from jira_simple.mcp.dispatcher import JiraToolDispatcher
from jira_simple.mcp.formatting import use_system_locale
from jira_simple.mcp.jira_api import JiraGateway
from jira_simple.utils.config import Config, load_environment
from jira_simple.utils.errors import ConfigurationError


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jira-show-issue",
        description="Show a Jira issue with its description and comments",
    )
    parser.add_argument("issue_key", help="Issue key, e.g. LB-8421")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_parser().parse_args(argv)

    # Load environment variables
    load_environment()
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        print(f"❌ {e} Put them in a .env file or export them.", file=sys.stderr)
        return 1

    use_system_locale()
    dispatcher = JiraToolDispatcher(JiraGateway(config))
    result = dispatcher.invoke("get_issue", {"issueKey": args.issue_key})

    if result.is_error:
        print(result.text, file=sys.stderr)
        return 1

    print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
