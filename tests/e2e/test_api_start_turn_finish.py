from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import router
from config.registry import GENERATOR_KEY, bind_model
from interview import CLOSING_LINE
from services.sessions import load_session


def _client() -> TestClient:
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_full_interview_over_http(make_model):
    bind_model(GENERATOR_KEY, lambda options: make_model().generate)
    client = _client()

    start = client.post(
        "/api/interviews/start",
        json={
            "num_required_questions": 1,
            "questions": ["What motivates you?"],
            "candidate_name": "Dana",
            "interviewer": {"name": "Robin", "voice": "en-CA-ClaraNeural"},
        },
    )
    assert start.status_code == 200
    body = start.json()
    session_id = body["session_id"]
    assert body["agenda_len"] == 6
    assert body["state"] == "warmup"
    assert body["interviewer"]["name"] == "Robin"

    utterances = []
    for i in range(7):
        turn = client.post(
            "/api/interviews/turn", json={"session_id": session_id, "candidate_response": f"answer {i}"}
        )
        assert turn.status_code == 200
        utterances.append(turn.json())

    assert "Dana" in utterances[0]["utterance"]
    assert utterances[4]["utterance"] == "Thanks for sharing. What motivates you?"
    assert utterances[4]["current_question"] == "What motivates you?"
    assert utterances[6]["utterance"] == CLOSING_LINE
    assert utterances[6]["finished"] is True
    assert utterances[6]["feedback"] == "You gave clear, structured answers."

    status = client.get(f"/api/interviews/{session_id}").json()
    assert status["state"] == "finished"
    assert status["cursor"] == 6


def test_unknown_session_is_404():
    client = _client()
    resp = client.post("/api/interviews/turn", json={"session_id": "nope", "candidate_response": "hi"})
    assert resp.status_code == 404


def test_too_many_required_questions_is_422(make_model):
    bind_model(GENERATOR_KEY, lambda options: make_model().generate)
    resp = _client().post(
        "/api/interviews/start", json={"num_required_questions": 3, "questions": ["Only one?"]}
    )
    assert resp.status_code == 422


def test_model_failure_on_start_is_502(make_model):
    bind_model(GENERATOR_KEY, lambda options: make_model(fail_on={"intro"}).generate)
    resp = _client().post("/api/interviews/start", json={"num_required_questions": 0})
    assert resp.status_code == 502


def test_ended_session_is_released(make_model):
    bind_model(GENERATOR_KEY, lambda options: make_model().generate)
    client = _client()
    session_id = client.post("/api/interviews/start", json={"num_required_questions": 0}).json()["session_id"]
    for _ in range(5):
        client.post("/api/interviews/turn", json={"session_id": session_id, "candidate_response": "ok"})
    assert client.get(f"/api/interviews/{session_id}").json()["finished"] is True

    assert client.delete(f"/api/interviews/{session_id}").status_code == 204
    assert load_session(session_id) is None
    assert client.get(f"/api/interviews/{session_id}").status_code == 404
    assert client.delete(f"/api/interviews/{session_id}").status_code == 404
