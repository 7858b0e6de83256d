"""Turn sequencer for a single mock interview session."""
from __future__ import annotations

import logging
import random
import re
import time
import uuid
from typing import Any, Callable, Dict, Optional, Sequence

from observability import log_event, span

from . import prompts
from .agenda import WARMUP_SLOTS, Agenda, build_agenda
from .collaborator import Generate, ask
from .errors import ConfigurationError, SequencingError
from .models import CandidateProfile, InterviewerOptions, InterviewState, PendingFollowUp, Slot
from .questions import CLOSING_LINE, INTERVIEW_LAYOUT, STAR_METHOD
from .shuffle import shuffle

logger = logging.getLogger(__name__)

_SENTENCE_END = re.compile(r"(?<=[.!?])(?![.!?])")  # after a run of terminators


def last_phrase(text: str) -> str:
    """Return the trailing sentence of ``text`` (the question part of a comment + question line)."""

    phrases = [phrase.strip() for phrase in _SENTENCE_END.split(text)]
    if phrases[-1]:
        return phrases[-1]
    prior = phrases[-2] if len(phrases) > 1 else ""
    if prior and prior[-1] not in ".!?":
        prior += "."
    return prior


class Interviewer:
    """Drives one interview: builds the agenda once, then produces one interviewer line per candidate turn.

    ``generate`` is the language-model collaborator, an async callable taking a prompt and returning text.
    ``rng`` seeds the question-bank shuffle and the layout question draw.
    ``on_interview_end`` receives the closing feedback exactly once, when the agenda has been fully walked.
    """

    def __init__(
        self,
        *,
        generate: Generate,
        num_required_questions: int,
        questions: Optional[Sequence[str]] = None,
        candidate_name: Optional[str] = None,
        candidate_resume: Optional[str] = None,
        job_title: Optional[str] = None,
        job_description: Optional[str] = None,
        interviewer_options: Optional[InterviewerOptions] = None,
        on_interview_end: Optional[Callable[[str], None]] = None,
        rng: Optional[random.Random] = None,
        session_id: Optional[str] = None,
    ) -> None:
        pool = list(STAR_METHOD if questions is None else questions)
        if num_required_questions < 0:
            raise ConfigurationError("num_required_questions must be >= 0")
        if num_required_questions > len(pool):
            raise ConfigurationError(
                f"num_required_questions={num_required_questions} exceeds question bank size {len(pool)}"
            )

        self.session_id = session_id or f"interview-{uuid.uuid4().hex[:12]}"
        self.required_question_count = num_required_questions
        self.candidate = CandidateProfile(
            name=candidate_name,
            resume=candidate_resume,
            job_title=job_title,
            job_description=job_description,
        )
        self.events: list[Dict[str, Any]] = []

        self._generate = generate
        self._rng = rng or random.Random()
        self._question_bank: tuple[str, ...] = tuple(shuffle(pool, self._rng))
        self._options = interviewer_options or InterviewerOptions()
        self._on_interview_end = on_interview_end

        self._agenda: Optional[Agenda] = None
        self._building = False
        self._cursor = 0
        self._in_flight = False
        self._last_utterance: Optional[str] = None
        self._feedback: Optional[str] = None

    # ========================================
    # Read-only accessors
    # ========================================

    @property
    def interviewer_options(self) -> InterviewerOptions:
        return self._options

    @property
    def question_bank(self) -> tuple[str, ...]:
        return self._question_bank

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def agenda(self) -> list[Slot]:
        if self._agenda is None:
            return []
        return self._agenda.snapshot()

    @property
    def feedback(self) -> Optional[str]:
        return self._feedback

    @property
    def state(self) -> InterviewState:
        if self._agenda is None:
            return InterviewState.NOT_STARTED
        if self._cursor >= len(self._agenda):
            return InterviewState.FINISHED
        if self._cursor < WARMUP_SLOTS:
            return InterviewState.WARMUP
        return InterviewState.ACTIVE

    @property
    def is_finished(self) -> bool:
        return self._feedback is not None

    # ========================================
    # Agenda builder
    # ========================================

    async def build(self) -> None:
        """Prepare the agenda. Must be awaited exactly once before the first :meth:`advance`."""

        if self._agenda is not None or self._building:
            raise SequencingError("Interview agenda has already been built")
        self._building = True
        try:
            with span(self, "build_agenda"):
                agenda = await build_agenda(
                    self._generate,
                    candidate=self.candidate,
                    question_bank=self._question_bank,
                    required_question_count=self.required_question_count,
                    layout_question=self._rng.choice(INTERVIEW_LAYOUT),
                )
        finally:
            self._building = False
        self._agenda = agenda
        log_event(
            "agenda_built",
            self.session_id,
            agenda_len=len(agenda),
            has_job=self.candidate.has_job,
            has_resume=self.candidate.has_resume,
        )

    # ========================================
    # Turn sequencer
    # ========================================

    async def advance(self, candidate_response: str) -> str:
        """Consume the candidate's last answer and return the interviewer's next line."""

        if self._agenda is None:
            raise SequencingError("build() must complete before advance()")
        if self._in_flight:
            raise SequencingError("advance() is already running for this session")

        self._in_flight = True
        try:
            if self.state is InterviewState.FINISHED:
                return await self._finish()
            utterance = await self._respond(candidate_response)
        finally:
            self._in_flight = False

        index = self._cursor
        self._agenda.resolve(index, utterance)
        self._cursor += 1
        self._last_utterance = utterance
        log_event("turn", self.session_id, cursor=index, state=self.state.value)
        return utterance

    async def _respond(self, candidate_response: str) -> str:
        agenda = self._agenda
        index = self._cursor
        if index < WARMUP_SLOTS:
            return agenda.text_at(index)

        slot = agenda[index]
        previous_line = agenda.text_at(index - 1)
        if isinstance(slot, PendingFollowUp):
            prompt = prompts.turn_prompt(previous_line, candidate_response, prompts.FOLLOW_UP_QUESTION)
            with span(self, "follow_up_question"):
                return await ask(self._generate, prompt)

        prompt = prompts.turn_prompt(previous_line, candidate_response, prompts.FOLLOW_UP_COMMENT)
        with span(self, "follow_up_comment"):
            comment = await ask(self._generate, prompt)
        return f"{comment} {slot.text}"

    async def _finish(self) -> str:
        if self._feedback is not None:
            logger.warning("advance() called on finished interview %s", self.session_id)
            return CLOSING_LINE

        with span(self, "closing_feedback"):
            feedback = await ask(self._generate, prompts.END_OF_INTERVIEW)
        self._feedback = feedback
        self._last_utterance = CLOSING_LINE
        self._emit_interview_ended(feedback)
        return CLOSING_LINE

    def _emit_interview_ended(self, feedback: str) -> None:
        self.events.append({"event": "interview_ended", "ts": time.time(), "feedback": feedback})
        log_event("interview_ended", self.session_id, outcome="feedback_ready")
        if self._on_interview_end is None:
            return
        try:
            self._on_interview_end(feedback)
        except Exception:  # noqa: BLE001
            logger.exception("on_interview_end callback failed for %s", self.session_id)

    # ========================================
    # Current question
    # ========================================

    def current_question(self) -> str:
        """Question portion of the most recent interviewer line."""

        if self._last_utterance is not None:
            return last_phrase(self._last_utterance)
        if self._agenda is None:
            raise SequencingError("build() must complete before current_question()")
        return last_phrase(self._agenda.text_at(0))


__all__ = ["Interviewer", "last_phrase"]
