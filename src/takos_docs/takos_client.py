"""Async Takos documentation API client using httpx.

Features:
- One short-lived AsyncClient per call (no shared state between tool calls)
- Failures collapse to ``None`` and are logged, never raised
- Base URL and API key configurable via TAKOS_API_URL / TAKOS_API_KEY env vars
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

import httpx

_DEFAULT_API_URL = "https://context7.com/api"
_DEFAULT_TOKENS = 5000
_USER_AGENT = "takos-docs/1.0.0"
_FINALIZED = "finalized"
# Bodies the backend sends with a 200 when it has nothing to return
_EMPTY_BODIES = {"No content available", "No context data available"}

log = logging.getLogger("takos-docs")


@dataclass(frozen=True, slots=True)
class Version:
    """Processing state of a project's indexed documentation."""

    state: str
    label: str = ""


@dataclass(frozen=True, slots=True)
class Project:
    """One documentation-indexed library in the Takos catalog."""

    id: str
    title: str
    description: str
    total_snippets: int
    trust_score: float
    version: Version

    @property
    def is_finalized(self) -> bool:
        return self.version.state == _FINALIZED


def filter_finalized(projects: Iterable[Project]) -> list[Project]:
    """Keep only projects whose documentation is finalized, in input order."""
    return [p for p in projects if p.is_finalized]


def _api_url() -> str:
    return os.environ.get("TAKOS_API_URL", _DEFAULT_API_URL)


def _headers() -> dict[str, str]:
    headers: dict[str, str] = {"User-Agent": _USER_AGENT}
    key = os.environ.get("TAKOS_API_KEY")
    if key:
        headers["Authorization"] = f"Bearer {key}"
    return headers


def _make_client() -> httpx.AsyncClient:
    """Create an AsyncClient bound to the backend (caller manages lifecycle)."""
    return httpx.AsyncClient(base_url=_api_url(), headers=_headers())


def _text(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a string, got {type(value).__name__}")
    return value


def _parse_project(item: dict[str, Any]) -> Project:
    """Build a Project from either the nested or the flat catalog item shape.

    Raises KeyError when the item carries no identifier and TypeError when a
    text field is not a string.
    """
    settings = item.get("settings") or item
    version = item.get("version") or {}
    if isinstance(version, str):
        version = {"version": version}
    project_id = settings.get("project") or settings.get("id")
    if not project_id:
        raise KeyError("project")
    return Project(
        id=_text(project_id, "project"),
        title=_text(settings.get("title") or project_id, "title"),
        description=_text(settings.get("description") or "", "description"),
        total_snippets=int(version.get("totalSnippets") or item.get("totalSnippets") or 0),
        trust_score=float(settings.get("trustScore") or item.get("trustScore") or 0.0),
        version=Version(
            state=_text(version.get("state") or "", "state"),
            label=str(version.get("version") or version.get("lastUpdate") or ""),
        ),
    )


async def fetch_projects() -> list[Project] | None:
    """Fetch the full project catalog.

    Returns None when the backend is unreachable, answers with an error
    status, or sends a payload that cannot be parsed.
    """
    try:
        async with _make_client() as client:
            resp = await client.get("/projects")
            resp.raise_for_status()
            items = resp.json()
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        log.warning("fetch_projects failed: %s (%s)", type(exc).__name__, exc)
        return None

    if not isinstance(items, list):
        log.warning("fetch_projects: expected a list, got %s", type(items).__name__)
        return None
    try:
        return [_parse_project(item) for item in items]
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        log.warning("fetch_projects: malformed catalog item: %s (%s)", type(exc).__name__, exc)
        return None


async def fetch_library_documentation(
    library_id: str,
    tokens: int = _DEFAULT_TOKENS,
    topic: str = "",
) -> str | None:
    """Fetch rendered documentation text for one library.

    Args:
        library_id: Takos-compatible library ID, e.g. ``vercel/nextjs``.
            A leading slash is ignored.
        tokens: Backend-interpreted upper bound on the size of the result.
        topic: Optional topic to focus the documentation on.

    Returns:
        The documentation text, or None if the library is unknown, not
        finalized, or the request failed.
    """
    library_id = library_id.removeprefix("/")
    params: dict[str, str | int] = {"tokens": tokens, "type": "txt"}
    if topic:
        params["topic"] = topic

    try:
        async with _make_client() as client:
            resp = await client.get(f"/v1/{library_id}", params=params)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        log.warning(
            "fetch_library_documentation failed for %s: %s (%s)",
            library_id,
            type(exc).__name__,
            exc,
        )
        return None

    if not resp.is_success:
        log.warning(
            "fetch_library_documentation for %s returned HTTP %d", library_id, resp.status_code
        )
        return None

    text = resp.text
    if not text.strip() or text.strip() in _EMPTY_BODIES:
        log.info("No documentation content for %s", library_id)
        return None
    return text
