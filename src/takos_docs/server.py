"""MCP server definition: the single FastMCP instance all tools register on."""

from mcp.server.fastmcp import FastMCP

mcp = FastMCP(
    name="Takos",
    instructions=(
        "Retrieves up-to-date documentation and code examples for any library. "
        "Call resolve-library-id first to obtain a Takos-compatible library ID, "
        "then pass it to get-library-docs."
    ),
)

# Import tools module so @mcp.tool() decorators execute at import time.
import takos_docs.tools as _tools  # noqa: F401, E402
