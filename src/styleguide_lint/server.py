"""Style-guide lint MCP server - main entry point."""
import logging
import sys

from mcp.server.fastmcp import FastMCP

from styleguide_lint.config import Config
from styleguide_lint.tools import lint

# Configure logging to stderr (CRITICAL: stdout is reserved for JSON-RPC)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)]
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("styleguide-lint")

# Load configuration
config = Config.load()

logger.info(f"Style-guide lint v{config.version} starting...")
logger.info(f"Docs directory: {config.docs_dir}")
logger.info(f"Default style guide: {config.default_style_guide.value}")
if config.rules_file:
    logger.info(f"Default rules file: {config.rules_file}")


def main():
    """Main entry point for the MCP server."""
    try:
        logger.info("Registering tools...")
        lint.register(mcp, config)
        logger.info(
            "Tools registered: lint_document, lint_text, fix_text, get_readability, "
            "generate_lint_report, validate_rules, get_lint_rules, list_style_guides"
        )

        # Run the server
        logger.info("Starting MCP server on stdio...")
        mcp.run(transport="stdio")

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
