"""takos-docs: MCP server for Takos documentation tools."""

import logging
import sys

from takos_docs.server import mcp

log = logging.getLogger("takos-docs")


def main() -> None:
    """CLI entry point: starts the MCP server over stdio.

    Exits with status 1 if the transport cannot be attached.
    """
    log.info("Takos documentation MCP server starting on stdio")
    try:
        mcp.run(transport="stdio")
    except Exception:
        log.exception("Fatal error in main()")
        sys.exit(1)
