"""Shared pytest fixtures for takos-docs test suite."""

from __future__ import annotations

import pytest

from takos_docs.takos_client import Project, Version


@pytest.fixture(autouse=True)
def takos_env(monkeypatch):
    """Point the client at a fake backend so tests never reach the real one."""
    monkeypatch.setenv("TAKOS_API_URL", "https://takos.test/api")
    monkeypatch.delenv("TAKOS_API_KEY", raising=False)


@pytest.fixture
def make_project():
    """Factory for Project records with sensible defaults."""

    def _make(
        project_id: str,
        title: str | None = None,
        description: str = "",
        state: str = "finalized",
        total_snippets: int = 100,
        trust_score: float = 7.0,
        label: str = "v1",
    ) -> Project:
        return Project(
            id=project_id,
            title=title or project_id.rsplit("/", 1)[-1],
            description=description,
            total_snippets=total_snippets,
            trust_score=trust_score,
            version=Version(state=state, label=label),
        )

    return _make
