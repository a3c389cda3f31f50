# =============================================================================
# main.py  —  Entry Point for the Givebutter MCP Server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py          (or the `givebutter-mcp` console script)
#
# WHAT HAPPENS:
#   1. Loads a .env file from the working directory, if present
#      (variables already set in the environment win)
#   2. Imports the FastMCP server, which registers every Givebutter tool
#   3. Serves MCP over stdio until the client disconnects
#
# The API key (GIVEBUTTER_API_KEY) is NOT checked here.  It is read on
# every tool call, so a missing key shows up as a clear error on the first
# call rather than as a server that never starts.
# =============================================================================

from dotenv import load_dotenv


def main() -> None:
    # Must run before the server module is imported: it reads the log level
    # from the environment at import time.
    load_dotenv()

    from tools.mcp_server import mcp

    mcp.run()


if __name__ == "__main__":
    main()
