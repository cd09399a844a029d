"""Tests for the MCP server wiring and process entry point."""

import asyncio
from unittest.mock import patch

import mcp.types as types

from jira_simple import main as main_module
from jira_simple.mcp.dispatcher import list_operations
from jira_simple.mcp.jira_server import create_server


def list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]
    return asyncio.run(handler(types.ListToolsRequest(method="tools/list"))).root.tools


def call_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


# =============================================================================
# Listing
# =============================================================================

class TestToolListing:
    def test_lists_dispatcher_operations(self, config):
        tools = {tool.name: tool for tool in list_tools(create_server(config))}

        assert set(tools) == {"get_my_issues", "search_issues", "get_projects", "get_issue"}
        for op in list_operations():
            assert tools[op["name"]].description == op["description"]
            assert tools[op["name"]].inputSchema == op["inputSchema"]

    def test_argument_schemas(self, config):
        tools = {tool.name: tool for tool in list_tools(create_server(config))}

        max_results = tools["get_my_issues"].inputSchema["properties"]["maxResults"]
        assert max_results["type"] == "integer"
        assert max_results["default"] == 50
        assert tools["search_issues"].inputSchema["required"] == ["jql"]
        assert tools["get_issue"].inputSchema["required"] == ["issueKey"]
        assert tools["get_projects"].inputSchema["properties"] == {}


# =============================================================================
# Invocation
# =============================================================================

class TestToolCalls:
    def test_call_returns_rendered_text(self, config, mock_request, make_response):
        mock_request.return_value = make_response(
            payload={"values": [{"id": "1", "key": "LB", "name": "Lightbox", "projectTypeKey": "software"}]}
        )

        result = call_tool(create_server(config), "get_projects", {})

        assert not result.isError
        assert result.content[0].text.startswith("# 📁 Projects (1)")

    def test_api_failure_is_a_normal_text_result(self, config, mock_request, make_response):
        mock_request.return_value = make_response(status=500, text="boom", reason="Server Error")

        result = call_tool(create_server(config), "get_issue", {"issueKey": "LB-1"})

        assert not result.isError
        assert result.content[0].text == "❌ Error: Jira API error: 500 Server Error - boom"

    def test_missing_required_argument_is_marked(self, config, mock_request):
        server = create_server(config)

        search = call_tool(server, "search_issues", {})
        issue = call_tool(server, "get_issue", None)

        assert not search.isError
        assert search.content[0].text == "❌ Error: Missing required argument: jql"
        assert issue.content[0].text == "❌ Error: Missing required argument: issueKey"
        mock_request.assert_not_called()

    def test_bad_max_results_is_marked(self, config, mock_request):
        result = call_tool(create_server(config), "get_my_issues", {"maxResults": "lots"})

        assert result.content[0].text.startswith("❌ Error: maxResults must be a positive integer")
        mock_request.assert_not_called()

    def test_unknown_tool_is_marked(self, config, mock_request):
        result = call_tool(create_server(config), "delete_everything", {})

        assert not result.isError
        assert result.content[0].text == "❌ Error: Unknown tool: delete_everything"
        mock_request.assert_not_called()


# =============================================================================
# Entry point
# =============================================================================

class TestMain:
    def test_missing_configuration_exits_with_one(self, monkeypatch):
        for name in ("JIRA_URL", "JIRA_BASE_URL", "JIRA_EMAIL", "JIRA_API_TOKEN"):
            monkeypatch.delenv(name, raising=False)

        with patch.object(main_module, "load_environment"), \
                patch.object(main_module, "create_server") as create, \
                patch.object(main_module, "run_stdio") as run:
            assert main_module.main() == 1

        create.assert_not_called()
        run.assert_not_called()

    def test_runs_stdio_server_with_user_locale(self, monkeypatch):
        monkeypatch.setenv("JIRA_URL", "https://example.atlassian.net")
        monkeypatch.setenv("JIRA_EMAIL", "me@example.com")
        monkeypatch.setenv("JIRA_API_TOKEN", "secret-token")

        with patch.object(main_module, "load_environment"), \
                patch.object(main_module, "use_system_locale") as use_locale, \
                patch.object(main_module, "create_server") as create, \
                patch.object(main_module, "run_stdio") as run:
            assert main_module.main() == 0

        use_locale.assert_called_once_with()
        run.assert_called_once_with(create.return_value)

    def test_server_failure_exits_with_one(self, monkeypatch):
        monkeypatch.setenv("JIRA_URL", "https://example.atlassian.net")
        monkeypatch.setenv("JIRA_EMAIL", "me@example.com")
        monkeypatch.setenv("JIRA_API_TOKEN", "secret-token")

        with patch.object(main_module, "load_environment"), \
                patch.object(main_module, "use_system_locale"), \
                patch.object(main_module, "create_server"), \
                patch.object(main_module, "run_stdio", side_effect=RuntimeError("stdin closed")):
            assert main_module.main() == 1
