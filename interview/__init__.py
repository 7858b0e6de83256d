"""Question sequencing for scripted mock interviews."""
from .agenda import Agenda, build_agenda
from .collaborator import Generate
from .errors import CollaboratorFailure, ConfigurationError, InterviewError, SequencingError
from .models import (
    INTERVIEWER_VOICES,
    CandidateProfile,
    InterviewerOptions,
    InterviewState,
    PendingFollowUp,
    Resolved,
    Scripted,
)
from .questions import CLOSING_LINE
from .session import Interviewer, last_phrase
from .shuffle import shuffle

__all__ = [
    "Agenda",
    "CLOSING_LINE",
    "CandidateProfile",
    "CollaboratorFailure",
    "ConfigurationError",
    "Generate",
    "INTERVIEWER_VOICES",
    "InterviewError",
    "InterviewState",
    "Interviewer",
    "InterviewerOptions",
    "PendingFollowUp",
    "Resolved",
    "Scripted",
    "SequencingError",
    "build_agenda",
    "last_phrase",
    "shuffle",
]
