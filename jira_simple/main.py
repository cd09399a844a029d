import sys

from jira_simple.mcp.formatting import use_system_locale
from jira_simple.mcp.jira_server import create_server, run_stdio
from jira_simple.utils.config import Config, load_environment
from jira_simple.utils.errors import ConfigurationError
from jira_simple.utils.logger import configure_logging, get_logger

logger = get_logger("jira-simple", "server.log")


def main() -> int:
    load_environment()

    try:
        config = Config.from_env()
    except ConfigurationError as e:
        logger.error(f"❌ Authentication Error: {e}")
        return 1

    configure_logging(config.log_level, config.log_dir)
    use_system_locale()

    try:
        server = create_server(config)
        logger.info("Jira Simple MCP Server running on stdio")
        run_stdio(server)
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
