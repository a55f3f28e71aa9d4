"""Explicit success/failure values threaded through the analysis stages.

Each stage returns either its value or a ``Failure``; callers branch with
``isinstance(result, Failure)`` instead of catching exceptions.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    CLIENT_INPUT = "client_input"
    EXTRACTION_FAILED = "extraction_failed"
    SERVICE_ERROR = "service_error"
    NO_RESPONSE = "no_response"
    MALFORMED_RESPONSE = "malformed_response"
    UNEXPECTED = "unexpected"


# Kinds caused by the caller's input; everything else is a server-side problem.
_CLIENT_KINDS = frozenset({ErrorKind.CLIENT_INPUT, ErrorKind.EXTRACTION_FAILED})


@dataclass(frozen=True)
class Failure:
    """A stage failure.

    ``message`` is safe to show to the caller. ``detail`` holds diagnostics
    (raw model output, exception text) that are logged but never returned.
    """
    kind: ErrorKind
    message: str
    detail: str | None = None

    @property
    def status_code(self) -> int:
        return 400 if self.kind in _CLIENT_KINDS else 500

    @property
    def is_client_error(self) -> bool:
        return self.kind in _CLIENT_KINDS
