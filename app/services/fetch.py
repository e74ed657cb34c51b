"""Document retrieval — fetch a URL and hand back its body as raw lines."""

from __future__ import annotations

import asyncio
import logging
import re
from urllib.parse import urlsplit

import httpx

from app.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = {"http", "https"}

# CRLF or a single vertical break; \x1c-\x1e are not line breaks.
_LINE_BREAK = re.compile(r"\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


class FetchError(Exception):
    """The document could not be retrieved."""


def validate_url(url: str) -> str:
    """Accept only absolute http(s) URLs.

    Raises:
        FetchError: If the URL is unparsable, relative or uses another scheme.
    """
    try:
        parts = urlsplit(url)
        # Port parsing is lazy in urlsplit; force it so bad ports fail here.
        _ = parts.port
    except (TypeError, ValueError) as exc:
        raise FetchError(f"Bad URL: {url!r}") from exc

    if not parts.scheme:
        raise FetchError(f"Missing URL scheme: {url!r}")
    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        raise FetchError(f"Unsupported URL scheme: {parts.scheme}")
    if not parts.netloc:
        raise FetchError(f"Non-absolute URL: {url!r}")
    return url


def split_lines(body: str) -> list[str]:
    """Split a body on every line break, keeping empty lines."""
    if not body:
        return []
    return _LINE_BREAK.split(body)


async def fetch_lines(
    url: str,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[str]:
    """GET ``url`` and return the response body split into lines.

    Args:
        url: Absolute http(s) URL.
        settings: Override for the application settings.
        client: Pre-built client; one is created from settings when omitted.

    Returns:
        The body lines, in order.

    Raises:
        FetchError: On an invalid URL, a network failure, a non-2xx final
            status or a body longer than ``fetch_max_lines``.
    """
    settings = settings or get_settings()
    validate_url(url)

    try:
        # Bounds the whole exchange; httpx timeouts only bound each operation.
        async with asyncio.timeout(settings.fetch_read_timeout):
            if client is None:
                timeout = httpx.Timeout(
                    settings.fetch_read_timeout, connect=settings.fetch_connect_timeout,
                )
                async with httpx.AsyncClient(
                    timeout=timeout, follow_redirects=settings.fetch_follow_redirects,
                ) as own_client:
                    body = await _get_body(own_client, url, settings)
            else:
                body = await _get_body(client, url, settings)
    except TimeoutError as exc:
        logger.warning("Fetch of %s exceeded %.1fs", url, settings.fetch_read_timeout)
        raise FetchError(f"Fetch timed out: {url}") from exc
    except httpx.HTTPError as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise FetchError(f"Fetch failed: {url}") from exc
    except Exception as exc:
        logger.warning("Unexpected fetch failure for %s", url, exc_info=True)
        raise FetchError(f"Fetch failed: {url}") from exc

    lines = split_lines(body)
    if len(lines) > settings.fetch_max_lines:
        raise FetchError(
            f"Document has {len(lines)} lines, limit is {settings.fetch_max_lines}"
        )
    logger.info("Fetched %s: %d lines", url, len(lines))
    return lines


async def _get_body(client: httpx.AsyncClient, url: str, settings: Settings) -> str:
    resp = await client.get(url, headers={"User-Agent": settings.fetch_user_agent})
    resp.raise_for_status()
    return resp.text or ""
