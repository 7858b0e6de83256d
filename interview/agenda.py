"""Agenda construction and slot resolution for an interview session."""
from __future__ import annotations

import asyncio
from typing import Iterator, Optional, Sequence

from . import prompts
from .collaborator import Generate, ask
from .errors import SequencingError
from .models import CandidateProfile, PendingFollowUp, Resolved, Scripted, Slot
from .questions import INTRODUCTION_PREFIX, get_opener

WARMUP_SLOTS = 3  # opener, layout question, introduction


class Agenda:
    """Ordered interview slots; resolution is one-way and happens in place."""

    def __init__(self, slots: Sequence[Slot]) -> None:
        self._slots: list[Slot] = list(slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, index: int) -> Slot:
        return self._slots[index]

    def __iter__(self) -> Iterator[Slot]:
        return iter(self._slots)

    def text_at(self, index: int) -> str:
        slot = self._slots[index]
        if isinstance(slot, PendingFollowUp):
            raise SequencingError(f"Slot {index} is a pending follow-up and has no text yet")
        return slot.text

    def resolve(self, index: int, text: str) -> Resolved:
        slot = self._slots[index]
        if isinstance(slot, Resolved):
            raise SequencingError(f"Slot {index} is already resolved")
        resolved = Resolved(text=text)
        self._slots[index] = resolved
        return resolved

    def snapshot(self) -> list[Slot]:
        return list(self._slots)


async def _maybe(generate: Generate, prompt: Optional[str]) -> Optional[str]:
    if prompt is None:
        return None
    return await ask(generate, prompt)


async def build_agenda(
    generate: Generate,
    *,
    candidate: CandidateProfile,
    question_bank: Sequence[str],
    required_question_count: int,
    layout_question: str,
) -> Agenda:
    """Generate the resume, job and introduction lines, then lay out every slot of the interview."""

    resume_prompt = prompts.resume_question(candidate.resume) if candidate.has_resume else None
    job_prompt = (
        prompts.job_question(candidate.job_title, candidate.job_description) if candidate.has_job else None
    )
    tasks = [
        asyncio.ensure_future(_maybe(generate, resume_prompt)),
        asyncio.ensure_future(_maybe(generate, job_prompt)),
        asyncio.ensure_future(ask(generate, prompts.introduction(candidate.name))),
    ]
    try:
        resume_q, job_q, intro = await asyncio.gather(*tasks)
    except BaseException:
        # one failed or the build was cancelled: stop the rest before they reach the model memory
        for task in tasks:
            task.cancel()
        raise

    slots: list[Slot] = [
        Scripted(text=get_opener(candidate.name)),
        Scripted(text=layout_question),
        Scripted(text=INTRODUCTION_PREFIX + intro),
        PendingFollowUp(),
    ]
    if job_q:
        slots.append(Scripted(text=job_q))
    if resume_q:
        slots.append(Scripted(text=resume_q))
    for question in question_bank[:required_question_count]:
        slots.extend([Scripted(text=question), PendingFollowUp()])
    return Agenda(slots)


__all__ = ["Agenda", "WARMUP_SLOTS", "build_agenda"]
