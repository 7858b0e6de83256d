"""Error taxonomy for interview sequencing."""
from __future__ import annotations


class InterviewError(RuntimeError):  # Base interview error
    pass


class CollaboratorFailure(InterviewError):  # Model generation failed or timed out
    pass


class ConfigurationError(InterviewError, ValueError):  # Invalid construction-time options
    pass


class SequencingError(InterviewError):  # Operation called out of order or concurrently
    pass


__all__ = ["InterviewError", "CollaboratorFailure", "ConfigurationError", "SequencingError"]
