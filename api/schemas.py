"""Pydantic schemas for the interview API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from interview import InterviewerOptions


class StartReq(BaseModel):
    num_required_questions: Optional[int] = Field(default=None, ge=0)
    questions: Optional[List[str]] = None
    candidate_name: Optional[str] = None
    candidate_resume: Optional[str] = None
    job_title: Optional[str] = None
    job_description: Optional[str] = None
    interviewer: Optional[InterviewerOptions] = None


class TurnReq(BaseModel):
    session_id: str
    candidate_response: str = ""


class ApiResp(BaseModel):
    session_id: str
    state: str
    cursor: int
    agenda_len: int
    utterance: Optional[str] = None
    current_question: Optional[str] = None
    finished: bool = False
    feedback: Optional[str] = None
    interviewer: InterviewerOptions
