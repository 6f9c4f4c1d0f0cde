"""Lexical reranking of catalog projects against a library-name query."""

from __future__ import annotations

import re
from collections.abc import Sequence

import numpy as np

from takos_docs.takos_client import Project

_EXACT_MATCH = 100.0
_NAME_MATCH = 70.0
_ID_MATCH = 30.0
_DESCRIPTION_MATCH = 10.0
_TOKEN_OVERLAP = 20.0

_WORD_RE = re.compile(r"[a-z0-9]+")


def _normalize(text: str) -> str:
    """Lowercase and drop everything but ASCII letters and digits ("Next.js" -> "nextjs")."""
    return "".join(_WORD_RE.findall(text.lower()))


def _words(text: str) -> set[str]:
    return set(_WORD_RE.findall(text.lower()))


def score_project(project: Project, query: str) -> float:
    """Score how well *project* matches *query*; higher is more relevant.

    Scoring:
      - Query equals the title or the last ID segment: +100.
      - Query is contained in the title or the last ID segment: +70.
      - Otherwise, query is contained in the full ID: +30.
      - Query is contained in the description: +10.
      - Fraction of query words present anywhere in ID/title/description: up to +20.

    A query with no letters or digits scores 0.
    """
    q = _normalize(query)
    if not q:
        return 0.0

    title = _normalize(project.title)
    name = _normalize(project.id.rsplit("/", 1)[-1])

    score = 0.0
    if q in (title, name):
        score += _EXACT_MATCH
    elif q in title or q in name:
        score += _NAME_MATCH
    elif q in _normalize(project.id):
        score += _ID_MATCH

    if q in _normalize(project.description):
        score += _DESCRIPTION_MATCH

    query_words = _words(query)
    haystack = _words(f"{project.id} {project.title} {project.description}")
    score += _TOKEN_OVERLAP * len(query_words & haystack) / len(query_words)
    return score


def rerank_projects(projects: Sequence[Project], query: str) -> list[Project]:
    """Return *projects* reordered by descending relevance to *query*.

    Ties keep their input order, so the backend's own ordering acts as the
    tiebreaker. The input sequence is not modified.
    """
    if not projects:
        return []
    scores = np.array([score_project(p, query) for p in projects], dtype=np.float64)
    order = np.argsort(-scores, kind="stable")
    return [projects[int(i)] for i in order]
