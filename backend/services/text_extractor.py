"""Plain-text extraction from uploaded résumé files (PDF, DOCX)."""

import io
import logging
import os
from typing import BinaryIO

import pdfplumber
from docx import Document
from docx.table import Table
from starlette.concurrency import run_in_threadpool

from models.requests import UploadedDocument
from models.results import ErrorKind, Failure

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".docx")


def _failure(detail: str) -> Failure:
    return Failure(
        ErrorKind.EXTRACTION_FAILED,
        "Could not extract text from resume.",
        detail=detail,
    )


def extract_pdf(stream: BinaryIO) -> str:
    """Extract text page by page; pages that fail or are blank are skipped."""
    parts = []
    with pdfplumber.open(stream) as pdf:
        logger.info("PDF has %d pages", len(pdf.pages))
        for number, page in enumerate(pdf.pages, start=1):
            try:
                page_text = page.extract_text() or ""
            except Exception as e:
                logger.warning("Failed to extract text from page %d: %s", number, e)
                continue
            if page_text.strip():
                parts.append(page_text)
            else:
                logger.warning("No text found on page %d", number)

    text = "\n".join(parts)
    logger.info("Extracted %d characters from PDF", len(text))
    if not text.strip():
        logger.warning("No text could be extracted from PDF file")
    return text


def _unique_cells(row) -> list:
    """Row cells, with a horizontally merged cell listed once."""
    cells = []
    for cell in row.cells:
        if cells and cells[-1]._tc is cell._tc:
            continue
        cells.append(cell)
    return cells


def extract_docx(stream: BinaryIO) -> str | None:
    """Extract the visible body text of a DOCX file, or None if it has no body."""
    doc = Document(io.BytesIO(stream.read()))
    if doc.element.body is None:
        logger.warning("Could not access document body")
        return None

    lines = []
    for block in doc.iter_inner_content():
        if isinstance(block, Table):
            for row in block.rows:
                lines.append("\t".join(cell.text for cell in _unique_cells(row)))
        else:
            lines.append(block.text)

    text = "\n".join(lines)
    logger.info("Extracted %d characters from DOCX", len(text))
    return text


def extract_text(filename: str, stream: BinaryIO) -> str | Failure:
    """Dispatch on the file extension and return the document's plain text.

    Never raises: unsupported formats, corrupt files and I/O errors all come
    back as an EXTRACTION_FAILED ``Failure``. An empty string means the file
    was readable but held no text.
    """
    extension = os.path.splitext(filename or "")[1].lower()
    if not extension:
        logger.warning("File has no extension: %s", filename)
        return _failure("missing extension")
    if extension not in SUPPORTED_EXTENSIONS:
        logger.warning("Unsupported file extension: %s", extension)
        return _failure(f"unsupported extension {extension}")

    logger.info("Extracting text from %s file", extension)
    try:
        if extension == ".pdf":
            return extract_pdf(stream)
        text = extract_docx(stream)
    except Exception as e:
        logger.error("Error extracting text from file %s: %s", filename, e)
        return _failure(str(e))

    if text is None:
        return _failure("document body not found")
    return text


async def extract_document(document: UploadedDocument) -> str | Failure:
    """Extract text from an uploaded document off the event loop."""
    return await run_in_threadpool(
        extract_text, document.filename, io.BytesIO(document.content)
    )
