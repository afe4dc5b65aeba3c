"""Error kinds raised by the resume analysis pipeline.

Each kind carries the HTTP status and the message that may be shown to a
caller. Underlying causes are chained with ``raise ... from`` and logged,
never exposed.
"""

from __future__ import annotations


class ResumeCheckError(Exception):
    """Base class for all pipeline errors."""

    status_code: int = 500
    public_message: str = "Internal server error."


class InputError(ResumeCheckError):
    """Required input is missing (no uploaded bytes)."""

    status_code = 400
    public_message = "No file uploaded."


class ExtractionError(ResumeCheckError):
    """Extraction yielded less text than the minimum usable length."""

    status_code = 400
    public_message = (
        "Could not extract sufficient text from resume. "
        "The document may be unreadable or an image without recognizable text."
    )


class ExtractionTimeoutError(ExtractionError):
    """Text recognition ran past its time limit and nothing usable was recovered."""

    public_message = (
        "Could not extract sufficient text from resume. "
        "Text recognition timed out on this document."
    )


class InferenceError(ResumeCheckError):
    """The model call failed or its output could not be reduced to an analysis."""


class InferenceTimeoutError(InferenceError):
    """The model call ran past its time limit."""

    status_code = 504
    public_message = "Analysis timed out."


class UnexpectedError(ResumeCheckError):
    """Any other failure caught at the pipeline boundary."""
