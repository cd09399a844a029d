"""Markdown rendering for tool results."""

import locale
from datetime import datetime

from jira_simple.mcp.models import IssueDetail, IssueSummary, ProjectSummary
from jira_simple.utils.logger import get_logger

logger = get_logger("jira-formatting", "jira_mcp.log")

JIRA_TIMESTAMP_FORMATS = ("%Y-%m-%dT%H:%M:%S.%f%z", "%Y-%m-%dT%H:%M:%S%z")


def use_system_locale() -> None:
    """Switch LC_TIME to the user's locale so %x and %X follow LANG/LC_TIME."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        logger.warning(f"Unsupported locale, timestamps use the C format: {e}")


def format_timestamp(value: str) -> str:
    """Render a Jira timestamp in local time using the locale's date and time format."""
    if not value:
        return "Unknown"
    for fmt in JIRA_TIMESTAMP_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        return parsed.astimezone().strftime("%x %X")
    return value


def format_issue(issue: IssueSummary, show_assignee: bool = False) -> str:
    lines = [
        f"## 🎫 {issue.key}: {issue.summary}",
        f"- **Status:** {issue.status}",
        f"- **Priority:** {issue.priority}",
        f"- **Type:** {issue.issue_type}",
        f"- **Project:** {issue.project}",
    ]
    if show_assignee:
        lines.append(f"- **Assignee:** {issue.assignee}")
    lines.append(f"- **Updated:** {format_timestamp(issue.updated)}")
    lines.append(f"- [Open in Jira]({issue.url})")
    return "\n".join(lines) + "\n"


def format_my_issues(issues: list[IssueSummary]) -> str:
    blocks = "\n".join(format_issue(issue) for issue in issues)
    return f"# 📋 My Issues ({len(issues)})\n\n{blocks}"


def format_search_results(jql: str, issues: list[IssueSummary]) -> str:
    blocks = "\n".join(format_issue(issue, show_assignee=True) for issue in issues)
    return f"# 🔍 Search Results ({len(issues)})\n\n**JQL:** `{jql}`\n\n{blocks}"


def format_projects(projects: list[ProjectSummary]) -> str:
    blocks = "\n".join(
        f"## {project.key}: {project.name}\n"
        f"- **ID:** {project.id}\n"
        f"- **Type:** {project.project_type}\n"
        f"- [Open in Jira]({project.url})\n"
        for project in projects
    )
    return f"# 📁 Projects ({len(projects)})\n\n{blocks}"


def format_issue_detail(issue: IssueDetail) -> str:
    sections = [
        f"# 🎫 {issue.key}: {issue.summary}",
        "\n".join([
            "## 📋 Basic Information",
            f"- **Status:** {issue.status}",
            f"- **Priority:** {issue.priority}",
            f"- **Type:** {issue.issue_type}",
            f"- **Project:** {issue.project}",
            f"- **Assignee:** {issue.assignee}",
            f"- **Reporter:** {issue.reporter}",
            f"- **Created:** {format_timestamp(issue.created)}",
            f"- **Updated:** {format_timestamp(issue.updated)}",
        ]),
        f"## 📝 Description\n{issue.description}",
    ]

    if issue.comments:
        comment_blocks = "\n\n".join(
            f"**{comment.author}** ({format_timestamp(comment.created)}):\n{comment.body}"
            for comment in issue.comments
        )
        sections.append(f"## 💬 Recent Comments ({len(issue.comments)})\n{comment_blocks}")

    sections.append(f"## 🔗 Links\n- [Open in Jira]({issue.url})")
    return "\n\n".join(sections)
