"""Shared type definitions for interview sessions."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

InterviewerVoice = Literal["en-CA-ClaraNeural", "en-CA-LiamNeural"]

INTERVIEWER_VOICES: tuple[InterviewerVoice, ...] = ("en-CA-ClaraNeural", "en-CA-LiamNeural")

DEFAULT_BIO = (
    "You are a senior hiring manager at a mid-sized technology company. You have interviewed hundreds of "
    "candidates, you are warm but direct, and you care about concrete examples more than buzzwords."
)


class InterviewerOptions(BaseModel):
    """Persona of the simulated interviewer."""

    model_config = ConfigDict(frozen=True)

    name: str = "Sasha"
    age: int = Field(default=30, ge=0)
    voice: InterviewerVoice = "en-CA-LiamNeural"
    bio: str = DEFAULT_BIO


class CandidateProfile(BaseModel):
    """Optional candidate inputs that flavor generated content."""

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = None
    resume: Optional[str] = None
    job_title: Optional[str] = None
    job_description: Optional[str] = None

    @property
    def has_resume(self) -> bool:
        return bool(self.resume)

    @property
    def has_job(self) -> bool:
        return bool(self.job_title and self.job_description)


class Scripted(BaseModel):
    """A fixed line to be read verbatim (or prefixed with a comment)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scripted"] = "scripted"
    text: str


class PendingFollowUp(BaseModel):
    """Marks a slot whose utterance must be generated by the model."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["follow_up"] = "follow_up"


class Resolved(BaseModel):
    """Utterance actually produced for a slot."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["resolved"] = "resolved"
    text: str


Slot = Annotated[Union[Scripted, PendingFollowUp, Resolved], Field(discriminator="kind")]


class InterviewState(str, Enum):
    NOT_STARTED = "not_started"
    WARMUP = "warmup"
    ACTIVE = "active"
    FINISHED = "finished"


__all__ = [
    "CandidateProfile",
    "DEFAULT_BIO",
    "INTERVIEWER_VOICES",
    "InterviewState",
    "InterviewerOptions",
    "InterviewerVoice",
    "PendingFollowUp",
    "Resolved",
    "Scripted",
    "Slot",
]
