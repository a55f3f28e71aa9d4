import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.datastructures import UploadFile

from api.dependencies import get_model
from config import settings
from models.requests import UploadedDocument
from models.responses import AnalysisResult, HealthResponse, ProblemDetails
from models.results import ErrorKind, Failure
from services import cv_analyzer
from services.llm_client import ChatModel

logger = logging.getLogger(__name__)

router = APIRouter()

GREETING = "Hello to CV-JD Analyzer. Call the /analyze api for output."
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


def failure_response(failure: Failure) -> Response:
    """Client errors are plain text; server errors are problem+json."""
    if failure.is_client_error:
        return PlainTextResponse(failure.message, status_code=failure.status_code)
    problem = ProblemDetails(status=failure.status_code, detail=failure.message)
    return JSONResponse(
        problem.model_dump(),
        status_code=failure.status_code,
        media_type="application/problem+json",
    )


def _has_form_content_type(request: Request) -> bool:
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    return content_type in FORM_CONTENT_TYPES


@router.get("/", response_class=PlainTextResponse)
async def root():
    return GREETING


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(
        status="ok",
        llm_provider=settings.llm_provider,
        llm_configured=settings.llm_configured,
    )


@router.post(
    "/analyze",
    response_model=AnalysisResult,
    responses={
        400: {"content": {"text/plain": {}}, "description": "Bad form input or unreadable resume"},
        500: {"model": ProblemDetails, "description": "AI service failure"},
    },
)
async def analyze(
    request: Request,
    model: ChatModel = Depends(get_model),
):
    try:
        logger.info("Starting document analysis request")

        if not _has_form_content_type(request):
            logger.warning("Invalid form data received")
            return failure_response(Failure(ErrorKind.CLIENT_INPUT, "Invalid form data."))

        form = await request.form()
        cv = form.get("cv")
        job_description = form.get("job_description")
        has_file = isinstance(cv, UploadFile)
        has_jd = isinstance(job_description, str) and bool(job_description)

        if not has_file or not has_jd:
            logger.warning(
                "Missing file or job description. File: %s, JD: %s", has_file, has_jd
            )
            return failure_response(
                Failure(ErrorKind.CLIENT_INPUT, "Missing file or job description.")
            )

        document = UploadedDocument(filename=cv.filename or "", content=await cv.read())
        result = await cv_analyzer.analyze(document, job_description, model)
        if isinstance(result, Failure):
            return failure_response(result)
        # Relay the model's JSON untouched, bypassing response_model filtering.
        return JSONResponse(result)

    except Exception:
        logger.exception("Unexpected error during document analysis")
        return failure_response(Failure(ErrorKind.UNEXPECTED, "An unexpected error occurred"))
