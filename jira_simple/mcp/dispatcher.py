"""Operation registry and handlers behind the Jira MCP tools.

Every call goes through ``JiraToolDispatcher.invoke``, which always returns a
``ToolResult``. Gateway and validation failures come back as error-flavored
text instead of exceptions.
"""

import traceback
from dataclasses import dataclass, field
from typing import Any, Callable, Optional
from urllib.parse import quote

from jira_simple.mcp import formatting
from jira_simple.mcp.jira_api import JiraGateway
from jira_simple.mcp.models import IssueDetail, parse_issue_list, parse_project_list
from jira_simple.utils.errors import (
    JiraSimpleError,
    UnknownOperationError,
    ValidationError,
)
from jira_simple.utils.logger import get_logger

logger = get_logger("jira-dispatcher", "jira_dispatcher.log")

DEFAULT_MAX_RESULTS = 50
ERROR_MARKER = "❌ Error:"


@dataclass
class ToolParameter:
    """Argument definition advertised in a tool's input schema."""

    name: str
    type: str  # "string", "integer"
    description: str
    default: Any = None
    required: bool = False


@dataclass
class Operation:
    name: str
    description: str
    parameters: list[ToolParameter] = field(default_factory=list)

    def input_schema(self) -> dict:
        properties = {}
        for param in self.parameters:
            prop = {"type": param.type, "description": param.description}
            if param.default is not None:
                prop["default"] = param.default
            properties[param.name] = prop

        schema = {"type": "object", "properties": properties}
        required = [p.name for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema


@dataclass
class ToolResult:
    text: str
    is_error: bool = False

    @classmethod
    def error(cls, exc: Exception) -> "ToolResult":
        return cls(text=f"{ERROR_MARKER} {exc}", is_error=True)


MAX_RESULTS_PARAM = ToolParameter(
    name="maxResults",
    type="integer",
    description=f"Maximum number of issues to return (default: {DEFAULT_MAX_RESULTS})",
    default=DEFAULT_MAX_RESULTS,
)

OPERATIONS = {
    op.name: op
    for op in (
        Operation(
            name="get_my_issues",
            description="Get issues assigned to current user",
            parameters=[MAX_RESULTS_PARAM],
        ),
        Operation(
            name="search_issues",
            description="Search for issues using JQL",
            parameters=[
                ToolParameter(
                    name="jql",
                    type="string",
                    description="JQL query string",
                    required=True,
                ),
                MAX_RESULTS_PARAM,
            ],
        ),
        Operation(
            name="get_projects",
            description="Get list of projects",
        ),
        Operation(
            name="get_issue",
            description="Get detailed information about a specific issue",
            parameters=[
                ToolParameter(
                    name="issueKey",
                    type="string",
                    description="Issue key (e.g., LB-8283)",
                    required=True,
                ),
            ],
        ),
    )
}


def list_operations() -> list[dict]:
    """Machine-readable listing of every operation and its argument schema."""
    return [
        {
            "name": op.name,
            "description": op.description,
            "inputSchema": op.input_schema(),
        }
        for op in OPERATIONS.values()
    ]


def _require(arguments: dict, name: str) -> Any:
    value = arguments.get(name)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(name)
    return value


def _max_results(arguments: dict) -> int:
    value = arguments.get("maxResults")
    if value is None:
        return DEFAULT_MAX_RESULTS
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        count = int(value)
        if count != float(value):
            raise ValueError(value)
    except (TypeError, ValueError):
        raise ValidationError("maxResults", f"maxResults must be a positive integer, got {value!r}")
    if count < 1:
        raise ValidationError("maxResults", f"maxResults must be a positive integer, got {value!r}")
    return count


class JiraToolDispatcher:
    def __init__(self, gateway: JiraGateway):
        self.gateway = gateway
        self._handlers: dict[str, Callable[[dict], str]] = {
            "get_my_issues": self.get_my_issues,
            "search_issues": self.search_issues,
            "get_projects": self.get_projects,
            "get_issue": self.get_issue,
        }

    def invoke(self, name: str, arguments: Optional[dict] = None) -> ToolResult:
        logger.info(f"Tool call: {name}")
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownOperationError(name)
            return ToolResult(text=handler(arguments or {}))
        except JiraSimpleError as e:
            logger.warning(f"Tool {name} failed: {e}")
            return ToolResult.error(e)
        except Exception as e:
            logger.error(f"Unexpected error in tool {name}: {e}\n{traceback.format_exc()}")
            return ToolResult.error(e)

    # -------------------------
    # HANDLERS
    # -------------------------
    def get_my_issues(self, arguments: dict) -> str:
        max_results = _max_results(arguments)
        result = self.gateway.call(
            f"/search/jql?jql=assignee=currentUser()&maxResults={max_results}"
        )
        issues = parse_issue_list(result, self.gateway.base_url)
        return formatting.format_my_issues(issues)

    def search_issues(self, arguments: dict) -> str:
        jql = _require(arguments, "jql")
        max_results = _max_results(arguments)
        # same escaping as JavaScript's encodeURIComponent
        encoded = quote(str(jql), safe="!*'()")
        result = self.gateway.call(f"/search/jql?jql={encoded}&maxResults={max_results}")
        issues = parse_issue_list(result, self.gateway.base_url)
        return formatting.format_search_results(jql, issues)

    def get_projects(self, arguments: dict) -> str:
        result = self.gateway.call("/project")
        projects = parse_project_list(result, self.gateway.base_url)
        return formatting.format_projects(projects)

    def get_issue(self, arguments: dict) -> str:
        issue_key = str(_require(arguments, "issueKey")).strip()
        result = self.gateway.call(
            f"/issue/{quote(issue_key, safe='')}?expand=description,comments"
        )
        issue = IssueDetail.from_api(result or {}, self.gateway.base_url)
        return formatting.format_issue_detail(issue)
