"""Normalized views of Jira issue, comment and project payloads.

Raw JSON is mapped here exactly once; placeholders for absent optional
fields are substituted in the ``from_api`` constructors so rendering code
never sees ``None``.
"""

from dataclasses import dataclass, field
from typing import Any

NO_PRIORITY = "None"
UNASSIGNED = "Unassigned"
UNKNOWN_USER = "Unknown"
NO_DESCRIPTION = "No description"
NO_COMMENT_TEXT = "No comment text"


def extract_text(node: Any) -> str:
    """Concatenate the text leaves of an Atlassian Document Format node."""
    if not isinstance(node, dict):
        return ""
    if node.get("type") == "text":
        return node.get("text") or ""
    content = node.get("content")
    if isinstance(content, list) and content:
        return "".join(extract_text(child) for child in content)
    return ""


def rich_text(value: Any, placeholder: str) -> str:
    """Plain text for a description or comment body that may be a string or ADF."""
    if isinstance(value, str):
        text = value
    elif isinstance(value, dict):
        text = extract_text(value)
    else:
        text = ""
    return text.strip() or placeholder


def _name(obj: Any, attr: str = "name", default: str = "") -> str:
    if isinstance(obj, dict) and obj.get(attr):
        return obj[attr]
    return default


@dataclass
class IssueSummary:
    key: str
    summary: str
    status: str
    priority: str
    issue_type: str
    project: str
    assignee: str
    reporter: str
    created: str
    updated: str
    url: str

    @classmethod
    def from_api(cls, raw: dict, base_url: str) -> "IssueSummary":
        return cls(**cls._common(raw, base_url))

    @staticmethod
    def _common(raw: dict, base_url: str) -> dict:
        fields = raw.get("fields") or {}
        key = raw.get("key", "")
        return {
            "key": key,
            "summary": fields.get("summary") or "",
            "status": _name(fields.get("status")),
            "priority": _name(fields.get("priority"), default=NO_PRIORITY),
            "issue_type": _name(fields.get("issuetype")),
            "project": _name(fields.get("project")),
            "assignee": _name(fields.get("assignee"), "displayName", UNASSIGNED),
            "reporter": _name(fields.get("reporter"), "displayName", UNKNOWN_USER),
            "created": fields.get("created") or "",
            "updated": fields.get("updated") or "",
            "url": f"{base_url}/browse/{key}",
        }


@dataclass
class Comment:
    author: str
    body: str
    created: str

    @classmethod
    def from_api(cls, raw: dict) -> "Comment":
        return cls(
            author=_name(raw.get("author"), "displayName", UNKNOWN_USER),
            body=rich_text(raw.get("body"), NO_COMMENT_TEXT),
            created=raw.get("created") or "",
        )


@dataclass
class IssueDetail(IssueSummary):
    description: str = NO_DESCRIPTION
    comments: list[Comment] = field(default_factory=list)

    @classmethod
    def from_api(cls, raw: dict, base_url: str) -> "IssueDetail":
        fields = raw.get("fields") or {}
        comment_page = fields.get("comment") or {}
        return cls(
            **cls._common(raw, base_url),
            description=rich_text(fields.get("description"), NO_DESCRIPTION),
            comments=[Comment.from_api(c) for c in comment_page.get("comments") or []],
        )


@dataclass
class ProjectSummary:
    id: str
    key: str
    name: str
    project_type: str
    url: str

    @classmethod
    def from_api(cls, raw: dict, base_url: str) -> "ProjectSummary":
        key = raw.get("key", "")
        return cls(
            id=str(raw.get("id", "")),
            key=key,
            name=raw.get("name", ""),
            project_type=raw.get("projectTypeKey", ""),
            url=f"{base_url}/browse/{key}",
        )


def parse_issue_list(result: Any, base_url: str) -> list[IssueSummary]:
    issues = result.get("issues") if isinstance(result, dict) else None
    return [IssueSummary.from_api(issue, base_url) for issue in issues or []]


def parse_project_list(result: Any, base_url: str) -> list[ProjectSummary]:
    # /project returns a bare array; the paginated variant wraps it in "values"
    if isinstance(result, list):
        projects = result
    elif isinstance(result, dict):
        projects = result.get("values") or []
    else:
        projects = []
    return [ProjectSummary.from_api(p, base_url) for p in projects]
