import os
import random
import sys
from pathlib import Path

import pytest

os.environ.setdefault("ENABLE_FILE_LOGS", "0")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.registry import GENERATOR_KEY, unbind_model
from interview import prompts
from services.sessions import clear_sessions


class FakeModel:
    """Scripted interviewer model that records every prompt it receives."""

    def __init__(self, fail_on=()):
        self.prompts = []
        self.fail_on = set(fail_on)

    def kind_of(self, prompt):
        if prompts.FOLLOW_UP_QUESTION in prompt:
            return "follow_up"
        if prompts.FOLLOW_UP_COMMENT in prompt:
            return "comment"
        if prompts.END_OF_INTERVIEW in prompt:
            return "closing"
        if "candidate's resume" in prompt:
            return "resume"
        if "applying for the position" in prompt:
            return "job"
        if prompt.startswith("Introduce yourself"):
            return "intro"
        return "other"

    async def generate(self, prompt):
        kind = self.kind_of(prompt)
        self.prompts.append(prompt)
        if kind in self.fail_on:
            raise RuntimeError(f"model unavailable for {kind}")
        return {
            "follow_up": "Could you tell me more about that?",
            "comment": "Thanks for sharing.",
            "closing": "You gave clear, structured answers.",
            "resume": "What did you build at Acme?",
            "job": "Why are you a fit for this role?",
            "intro": "I'm Sasha, a hiring manager here. Tell me about yourself.",
        }.get(kind, "ok")

    def kinds(self):
        return [self.kind_of(p) for p in self.prompts]


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def rng():
    return random.Random(7)


@pytest.fixture(autouse=True)
def _isolate_sessions():
    clear_sessions()
    unbind_model(GENERATOR_KEY)
    try:
        yield
    finally:
        clear_sessions()
        unbind_model(GENERATOR_KEY)


@pytest.fixture
def make_model():
    return FakeModel
