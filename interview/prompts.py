from __future__ import annotations  # Prompt templates sent to the interviewer model

from textwrap import dedent
from typing import Optional

from .models import DEFAULT_BIO, InterviewerOptions


FOLLOW_UP_QUESTION = dedent(  # Instruction for a model-generated follow-up slot
    """
    Ask the candidate one short follow-up question about their last answer.
    Do not comment on the answer first. Reply with only the question.
    """
).strip()

FOLLOW_UP_COMMENT = dedent(  # Instruction for the comment prefixed to a scripted question
    """
    Briefly acknowledge the candidate's last answer in one short sentence.
    Do not ask a question; the next question will be added after your comment.
    """
).strip()

END_OF_INTERVIEW = dedent(  # Instruction for the closing feedback
    """
    The interview is over. Give the candidate constructive feedback on how they did:
    name two things they did well and two things they could improve, referring to their actual answers.
    Speak directly to the candidate in a few short paragraphs.
    """
).strip()


def persona_system_prompt(options: InterviewerOptions) -> str:  # System prompt for the simulated interviewer
    return dedent(
        f"""
        You are {options.name}, a {options.age}-year-old interviewer running a practice job interview.
        {options.bio or DEFAULT_BIO}
        Stay in character, keep every reply short and conversational, and never mention that you are an AI.
        """
    ).strip()


def resume_question(resume: str) -> str:  # Ask for one question grounded in the resume
    return dedent(
        f"""
        Here is the candidate's resume:
        {resume}

        Write one interview question about a specific experience or project from this resume.
        Reply with only the question.
        """
    ).strip()


def job_question(job_title: str, job_description: str) -> str:  # Ask for one question grounded in the job posting
    return dedent(
        f"""
        The candidate is applying for the position of {job_title}. Here is the job description:
        {job_description}

        Write one interview question that checks whether the candidate fits this role.
        Reply with only the question.
        """
    ).strip()


def introduction(candidate_name: Optional[str] = None) -> str:  # Ask for the interviewer's self-introduction
    addressee = f"the candidate, {candidate_name}" if candidate_name else "the candidate"
    return dedent(
        f"""
        Introduce yourself to {addressee} in two or three sentences: your name, your role and what you enjoy
        about it. Then ask them to tell you a little about themselves.
        """
    ).strip()


def turn_prompt(previous_line: str, candidate_response: str, instruction: str) -> str:  # Context for one turn
    return "\n".join(
        [
            f'Interviewer: "{previous_line}"',
            f'Candidate: "{candidate_response}"',
            instruction,
        ]
    )


__all__ = [
    "DEFAULT_BIO",
    "END_OF_INTERVIEW",
    "FOLLOW_UP_COMMENT",
    "FOLLOW_UP_QUESTION",
    "introduction",
    "job_question",
    "persona_system_prompt",
    "resume_question",
    "turn_prompt",
]
