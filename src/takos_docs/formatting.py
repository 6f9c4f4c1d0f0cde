"""Plain-text rendering of catalog projects for tool responses."""

from __future__ import annotations

from collections.abc import Sequence

from takos_docs.takos_client import Project

_SEPARATOR = "\n\n---\n\n"


def format_project(project: Project) -> str:
    return (
        f"- Title: {project.title}\n"
        f"- Takos-compatible library ID: {project.id}\n"
        f"- Description: {project.description or '(no description)'}\n"
        f"- Code Snippets: {project.total_snippets:,}\n"
        f"- Trust Score: {project.trust_score:g}\n"
        f"- Version: {project.version.label or 'unknown'}"
    )


def format_projects_list(projects: Sequence[Project]) -> str:
    """Render projects as ``---``-separated blocks in input order.

    An empty sequence renders as an empty string.
    """
    return _SEPARATOR.join(format_project(p) for p in projects)
