from app.models.result import (  # noqa: F401
    OUT_MALFORMED,
    OUT_URL_ERROR,
    AnalysisResult,
    ResultKind,
)
