"""Deepest-text extraction for line-oriented markup.

The document is a sequence of lines. After trimming, each line is either a
bare opening marker (``<name>``), a bare closing marker (``</name>``) or a
plain text line. Blank lines are ignored. The text line seen under the most
open tags is reported; on equal depth the first one wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from enum import StrEnum
from typing import NamedTuple

from app.models.result import AnalysisResult

logger = logging.getLogger(__name__)

_OPEN_TAG = re.compile(r"<([A-Za-z][A-Za-z0-9]*)>")
_CLOSE_TAG = re.compile(r"</([A-Za-z][A-Za-z0-9]*)>")


class LineKind(StrEnum):
    BLANK = "blank"
    OPEN = "open"
    CLOSE = "close"
    MALFORMED = "malformed"
    TEXT = "text"


class ClassifiedLine(NamedTuple):
    kind: LineKind
    value: str = ""


def classify_line(raw: str | None) -> ClassifiedLine:
    """Classify one raw line.

    ``value`` holds the tag name for markers and the trimmed line for text.
    """
    if raw is None:
        return ClassifiedLine(LineKind.BLANK)

    line = raw.strip()
    if not line:
        return ClassifiedLine(LineKind.BLANK)

    if not line.startswith("<"):
        return ClassifiedLine(LineKind.TEXT, line)

    match = _OPEN_TAG.fullmatch(line)
    if match:
        return ClassifiedLine(LineKind.OPEN, match.group(1))

    match = _CLOSE_TAG.fullmatch(line)
    if match:
        return ClassifiedLine(LineKind.CLOSE, match.group(1))

    # Attributes, self-closing syntax, stray brackets
    return ClassifiedLine(LineKind.MALFORMED, line)


def analyze(lines: Iterable[str | None] | None) -> AnalysisResult:
    """Return the deepest text line of ``lines`` or a malformed result.

    Never raises: any unexpected failure while reading the lines is reported
    as malformed structure.
    """
    if lines is None:
        return AnalysisResult.malformed()

    try:
        return _select_deepest(lines)
    except Exception:
        logger.debug("Analysis aborted by unexpected error", exc_info=True)
        return AnalysisResult.malformed()


def _select_deepest(lines: Iterable[str | None]) -> AnalysisResult:
    stack: list[str] = []
    best_depth = -1
    best_text: str | None = None

    for raw in lines:
        kind, value = classify_line(raw)

        if kind == LineKind.BLANK:
            continue

        if kind == LineKind.OPEN:
            stack.append(value)
            continue

        if kind == LineKind.CLOSE:
            if not stack:
                logger.debug("Closing tag </%s> with no open tag", value)
                return AnalysisResult.malformed()
            if stack[-1] != value:
                logger.debug("Closing tag </%s> does not match <%s>", value, stack[-1])
                return AnalysisResult.malformed()
            stack.pop()
            continue

        if kind == LineKind.MALFORMED:
            logger.debug("Malformed markup line: %r", value)
            return AnalysisResult.malformed()

        depth = len(stack)
        if depth > best_depth:
            best_depth = depth
            best_text = value

    if stack:
        logger.debug("Unclosed tags at end of input: %s", stack)
        return AnalysisResult.malformed()
    if best_text is None:
        logger.debug("No text line found")
        return AnalysisResult.malformed()

    return AnalysisResult.ok_text(best_text)
