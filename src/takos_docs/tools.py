"""MCP tool implementations: resolve-library-id and get-library-docs.

Both tools report backend absences as plain text in a normal response;
only malformed arguments (rejected by the FastMCP schema) become tool errors.
"""

from __future__ import annotations

import logging
from typing import Annotated

from pydantic import Field

from takos_docs import takos_client
from takos_docs.formatting import format_projects_list
from takos_docs.ranking import rerank_projects
from takos_docs.server import mcp

log = logging.getLogger("takos-docs")

MIN_TOKENS = 5000

CATALOG_UNAVAILABLE = "Failed to retrieve library documentation data from Takos"
NO_FINALIZED_LIBRARIES = "No finalized documentation libraries available"
LIBRARIES_PREAMBLE = "Available libraries and their Takos-compatible library ID:\n\n"
DOCUMENTATION_NOT_FOUND = (
    "Documentation not found or not finalized for this library. "
    "This might have happened because you used an invalid Takos-compatible library ID. "
    "To get a valid Takos-compatible library ID, use the 'resolve-library-id' "
    "with the package name you wish to retrieve documentation for."
)

# ---------------------------------------------------------------------------
# Tool 1: resolve-library-id
# ---------------------------------------------------------------------------


@mcp.tool(
    name="resolve-library-id",
    description=(
        "Required first step: Resolves a general package name into a Takos-compatible "
        "library ID. Must be called before using 'get-library-docs' to retrieve a valid "
        "Takos-compatible library ID."
    ),
)
async def resolve_library_id(
    libraryName: Annotated[  # noqa: N803
        str | None,
        Field(description="Optional library name to search for and rerank results based on."),
    ] = None,
) -> str:
    projects = await takos_client.fetch_projects()
    if projects is None:
        return CATALOG_UNAVAILABLE

    finalized = takos_client.filter_finalized(projects)
    if not finalized:
        log.info("Catalog has %d projects, none finalized", len(projects))
        return NO_FINALIZED_LIBRARIES

    ranked = rerank_projects(finalized, libraryName) if libraryName else finalized
    return LIBRARIES_PREAMBLE + format_projects_list(ranked)


# ---------------------------------------------------------------------------
# Tool 2: get-library-docs
# ---------------------------------------------------------------------------


@mcp.tool(
    name="get-library-docs",
    description=(
        "Fetches up-to-date documentation for a library. You must call 'resolve-library-id' "
        "first to obtain the exact Takos-compatible library ID required to use this tool."
    ),
)
async def get_library_docs(
    context7CompatibleLibraryID: Annotated[  # noqa: N803
        str,
        Field(
            min_length=1,
            description=(
                "Exact Takos-compatible library ID (e.g., 'mongodb/docs', 'vercel/nextjs') "
                "retrieved from 'resolve-library-id'."
            ),
        ),
    ],
    topic: Annotated[
        str,
        Field(description="Topic to focus documentation on (e.g., 'hooks', 'routing')."),
    ] = "",
    tokens: Annotated[
        int,
        Field(
            ge=MIN_TOKENS,
            description=(
                f"Maximum number of tokens of documentation to retrieve (default: {MIN_TOKENS}). "
                "Higher values provide more context but consume more tokens."
            ),
        ),
    ] = MIN_TOKENS,
) -> str:
    text = await takos_client.fetch_library_documentation(
        context7CompatibleLibraryID, tokens=tokens, topic=topic
    )
    if not text:
        return DOCUMENTATION_NOT_FOUND
    return text
