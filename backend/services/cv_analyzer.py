"""Orchestrator: one résumé + job description through the analysis stages.

Pipeline:
1. Text extraction (PDF / DOCX)
2. Prompt rendering
3. Chat-completion call
4. JSON validation of the model's reply

Each stage returns its value or a ``Failure``; the first failure ends the run.
"""

import logging
from typing import Any

from models.requests import UploadedDocument
from models.results import ErrorKind, Failure
from services import llm_client, prompt_builder, response_validator, text_extractor
from services.llm_client import ChatModel

logger = logging.getLogger(__name__)


async def analyze(
    document: UploadedDocument,
    job_description: str,
    model: ChatModel,
) -> Any | Failure:
    """Run the extraction -> prompt -> model -> validation pipeline."""
    logger.info("Processing file: %s, Size: %d bytes", document.filename, document.size)

    # --- Stage 1: Text extraction ---
    cv_text = await text_extractor.extract_document(document)
    if isinstance(cv_text, Failure):
        logger.error(
            "Could not extract text from resume file: %s (%d bytes) at extraction stage: %s",
            document.filename, document.size, cv_text.detail,
        )
        return cv_text
    if not cv_text.strip():
        logger.error(
            "Could not extract text from resume file: %s (%d bytes) at extraction stage: no text",
            document.filename, document.size,
        )
        return Failure(ErrorKind.EXTRACTION_FAILED, "Could not extract text from resume.")

    logger.info("Extracted text length: %d characters", len(cv_text))

    # --- Stage 2 + 3: Prompt and model call ---
    prompt = prompt_builder.build_analysis_prompt(cv_text, job_description)
    raw = await llm_client.complete(model, prompt)
    if isinstance(raw, Failure):
        logger.error(
            "Model call failed for %s (%d bytes) at model stage: %s",
            document.filename, document.size, raw.message,
        )
        return raw

    # --- Stage 4: Validation ---
    result = response_validator.validate(raw)
    if isinstance(result, Failure):
        logger.error(
            "Invalid model response for %s (%d bytes) at validation stage",
            document.filename, document.size,
        )
    return result
