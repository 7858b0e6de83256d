"""FastAPI routes for turn-by-turn interview control."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Response

from api.schemas import ApiResp, StartReq, TurnReq
from config.settings import settings
from interview import CollaboratorFailure, ConfigurationError, Interviewer, InterviewerOptions, SequencingError
from services.sessions import drop_session, generator_for, load_session, register_session


router = APIRouter(prefix="/api/interviews")


def _default_options() -> InterviewerOptions:
    return InterviewerOptions(name=settings.INTERVIEWER_NAME, voice=settings.INTERVIEWER_VOICE)


def _resp(interviewer: Interviewer, utterance: Optional[str] = None) -> ApiResp:
    agenda_len = len(interviewer.agenda)
    return ApiResp(
        session_id=interviewer.session_id,
        state=interviewer.state.value,
        cursor=interviewer.cursor,
        agenda_len=agenda_len,
        utterance=utterance,
        current_question=interviewer.current_question() if agenda_len else None,
        finished=interviewer.is_finished,
        feedback=interviewer.feedback,
        interviewer=interviewer.interviewer_options,
    )


def _require(session_id: str) -> Interviewer:
    interviewer = load_session(session_id)
    if interviewer is None:
        raise HTTPException(status_code=404, detail="Unknown interview session")
    return interviewer


@router.post("/start", response_model=ApiResp)
async def start(req: StartReq) -> ApiResp:
    options = req.interviewer or _default_options()
    num_required = settings.NUM_REQUIRED_QUESTIONS if req.num_required_questions is None else req.num_required_questions
    try:
        interviewer = Interviewer(
            generate=generator_for(options),
            num_required_questions=num_required,
            questions=req.questions,
            candidate_name=req.candidate_name,
            candidate_resume=req.candidate_resume,
            job_title=req.job_title,
            job_description=req.job_description,
            interviewer_options=options,
        )
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    try:
        await interviewer.build()
    except CollaboratorFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    register_session(interviewer)
    return _resp(interviewer)


@router.post("/turn", response_model=ApiResp)
async def turn(req: TurnReq) -> ApiResp:
    interviewer = _require(req.session_id)
    try:
        utterance = await interviewer.advance(req.candidate_response)
    except SequencingError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except CollaboratorFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    return _resp(interviewer, utterance)


@router.get("/{session_id}", response_model=ApiResp)
async def status(session_id: str) -> ApiResp:
    return _resp(_require(session_id))


@router.delete("/{session_id}", status_code=204)
async def end_session(session_id: str) -> Response:
    if not drop_session(session_id):
        raise HTTPException(status_code=404, detail="Unknown interview session")
    return Response(status_code=204)
