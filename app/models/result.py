"""Analysis result — the one outcome produced per analyzed document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

OUT_MALFORMED = "malformed HTML"
OUT_URL_ERROR = "URL connection error"


class ResultKind(StrEnum):
    TEXT = "text"
    MALFORMED = "malformed"
    URL_ERROR = "url_error"


@dataclass(frozen=True)
class AnalysisResult:
    """Tagged outcome: deepest text, malformed structure, or retrieval error."""
    kind: ResultKind
    text: str | None = None

    @classmethod
    def ok_text(cls, text: str) -> AnalysisResult:
        return cls(ResultKind.TEXT, text)

    @classmethod
    def malformed(cls) -> AnalysisResult:
        return cls(ResultKind.MALFORMED)

    @classmethod
    def url_error(cls) -> AnalysisResult:
        return cls(ResultKind.URL_ERROR)

    def render(self) -> str:
        """Return the single output line for this result."""
        if self.kind == ResultKind.TEXT and self.text is not None:
            return self.text
        if self.kind == ResultKind.URL_ERROR:
            return OUT_URL_ERROR
        return OUT_MALFORMED
