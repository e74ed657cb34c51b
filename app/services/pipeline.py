"""Analysis pipeline — retrieve a document and find its deepest text line.

Flow:
  1. Validate and fetch the URL into raw lines
  2. Classify lines and track nesting depth
  3. Return exactly one AnalysisResult (never raises)
"""

from __future__ import annotations

import logging

import httpx

from app.core.config import Settings
from app.models.result import AnalysisResult
from app.services.fetch import FetchError, fetch_lines
from app.services.html_analyzer import analyze

logger = logging.getLogger(__name__)


def analyze_lines(lines: list[str | None] | None) -> AnalysisResult:
    """Analyze already-retrieved lines."""
    return analyze(lines)


async def analyze_url(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> AnalysisResult:
    """Fetch ``url`` and analyze it.

    Retrieval failures become a URL error result; anything else that goes
    wrong becomes a malformed result.
    """
    try:
        lines = await fetch_lines(url, settings=settings, client=client)
    except FetchError as exc:
        logger.info("Retrieval failed for %s: %s", url, exc)
        return AnalysisResult.url_error()
    except Exception:
        logger.exception("Unexpected failure retrieving %s", url)
        return AnalysisResult.malformed()

    result = analyze(lines)
    logger.info("Analyzed %s: %s", url, result.kind)
    return result
