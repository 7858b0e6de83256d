"""Static interview lines and the default behavioural question bank."""
from __future__ import annotations

from typing import Optional

STAR_METHOD: tuple[str, ...] = (
    "Tell me about a time you had to deal with a difficult coworker. How did you handle it?",
    "Describe a situation where you had to meet a tight deadline. What did you do?",
    "Tell me about a time you made a mistake at work. How did you fix it?",
    "Give me an example of a goal you set and how you achieved it.",
    "Describe a time when you had to persuade someone to see things your way.",
    "Tell me about a time you had to learn something new very quickly.",
    "Describe a project you led. What was the outcome?",
    "Tell me about a time you received critical feedback. How did you respond?",
    "Give an example of a time you went above and beyond what was expected of you.",
    "Describe a time you had to juggle several priorities at once. How did you decide what came first?",
    "Tell me about a time you disagreed with a decision made by your manager.",
    "Describe a situation where you had to solve a problem without all the information you needed.",
)

INTERVIEW_LAYOUT: tuple[str, ...] = (
    "Before we begin, here's how this will work. I'll start with a quick introduction, then ask you a "
    "handful of questions about your experience, and I may follow up on your answers. Sound good?",
    "Just so you know what to expect: I'll introduce myself, then we'll go through a few behavioural "
    "questions, and I'll probably dig into some of your answers a little deeper. Ready?",
    "Here's the plan for today. After a short introduction from me, I'll ask some questions about past "
    "situations you've handled, with a few follow-ups along the way. Does that work for you?",
)

INTRODUCTION_PREFIX = "Great. "

CLOSING_LINE = "That's all of my questions. Thanks for participating in this practice interview."


def get_opener(candidate_name: Optional[str] = None) -> str:
    """First line of every interview, addressed to the candidate when a name is known."""

    if candidate_name:
        return f"Hi {candidate_name}, thanks for joining me today. Are you ready to get started?"
    return "Hi there, thanks for joining me today. Are you ready to get started?"


__all__ = ["CLOSING_LINE", "INTERVIEW_LAYOUT", "INTRODUCTION_PREFIX", "STAR_METHOD", "get_opener"]
