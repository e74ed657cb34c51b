"""Analysis endpoints — deepest text line of a URL or of posted lines."""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import get_settings
from app.models.result import AnalysisResult, ResultKind
from app.services.pipeline import analyze_lines, analyze_url

router = APIRouter(prefix="/analyze", tags=["analyze"])


class AnalyzeUrlRequest(BaseModel):
    url: str


class AnalyzeLinesRequest(BaseModel):
    lines: list[str | None]


class AnalyzeResponse(BaseModel):
    kind: ResultKind
    text: str | None = None
    output: str

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalyzeResponse":
        return cls(kind=result.kind, text=result.text, output=result.render())


@router.post("/url", response_model=AnalyzeResponse)
async def analyze_document_url(body: AnalyzeUrlRequest) -> AnalyzeResponse:
    """Fetch a document and return its deepest text line."""
    result = await analyze_url(body.url, settings=get_settings())
    return AnalyzeResponse.from_result(result)


@router.post("/lines", response_model=AnalyzeResponse)
async def analyze_document_lines(body: AnalyzeLinesRequest) -> AnalyzeResponse:
    """Analyze lines supplied directly by the caller."""
    return AnalyzeResponse.from_result(analyze_lines(body.lines))
