"""Exception types raised by the Jira gateway, dispatcher and startup code."""


class JiraSimpleError(Exception):
    """Base exception for jira-simple-mcp."""

    pass


class ConfigurationError(JiraSimpleError):
    """Raised when required environment configuration is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        message = (
            "Jira authentication required. Set "
            f"{', '.join(missing)} environment variable"
            f"{'s' if len(missing) > 1 else ''}."
        )
        super().__init__(message)


class ValidationError(JiraSimpleError):
    """Raised when a tool argument is missing or malformed."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        if message is None:
            message = f"Missing required argument: {field}"
        super().__init__(message)


class ApiError(JiraSimpleError):
    """Raised when Jira answers with a non-success HTTP status."""

    def __init__(self, status: int, status_text: str, body: str):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"Jira API error: {status} {status_text} - {body}")


class NetworkError(JiraSimpleError):
    """Raised when the request never got an HTTP answer."""

    def __init__(self, message: str):
        self.reason = message
        super().__init__(f"Network error: {message}")


class UnknownOperationError(JiraSimpleError):
    """Raised when a tool name has no registered handler."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
