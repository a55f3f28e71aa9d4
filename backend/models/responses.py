from pydantic import BaseModel, ConfigDict


class AnalysisResult(BaseModel):
    """Shape the model is asked to return.

    Only documents the /analyze response; the model's JSON is relayed as-is
    and never validated against this schema.
    """
    model_config = ConfigDict(extra="allow")

    skillGaps: list[str] = []
    atsScore: float = 0.0


class ProblemDetails(BaseModel):
    """RFC 7807 error body for server-side failures."""
    type: str = "https://tools.ietf.org/html/rfc9110#section-15.6.1"
    title: str = "An error occurred while processing your request."
    status: int = 500
    detail: str = ""


class HealthResponse(BaseModel):
    status: str = "ok"
    llm_provider: str = ""
    llm_configured: bool = False
