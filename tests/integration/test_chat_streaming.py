"""Integration tests for the chat WebSocket endpoint.

Uses Starlette's TestClient against the real FastAPI app. The responder is
swapped through dependency overrides; everything else is real.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_check as check
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resume_chat.agent.responders import SKILLS_ANSWER, SimulatedResponder, get_responder
from resume_chat.api.sessions import ResumeStore
from resume_chat.client.assembler import StreamingMessageAssembler
from resume_chat.models.schemas import STREAM_END_TOKEN, Role


class RecordingResponder:
    """Yields fixed fragments and remembers what it was asked."""

    def __init__(self, fragments: list[str], fail_with: Exception | None = None) -> None:
        self.fragments = fragments
        self.fail_with = fail_with
        self.calls: list[tuple[str, str | None]] = []

    async def stream_response(
        self, question: str, resume: str | None = None
    ) -> AsyncGenerator[str]:
        self.calls.append((question, resume))
        for fragment in self.fragments:
            yield fragment
        if self.fail_with is not None:
            raise self.fail_with


def receive_turn(websocket) -> list[str]:
    """Collect frames up to and excluding the end token."""
    frames: list[str] = []
    while True:
        frame = websocket.receive_text()
        if frame == STREAM_END_TOKEN:
            return frames
        frames.append(frame)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


class TestChatSocket:
    """Tests for WS /ws."""

    def test_streams_simulated_answer_then_end_token(
        self, app: FastAPI, client: TestClient
    ) -> None:
        app.dependency_overrides[get_responder] = lambda: SimulatedResponder()

        with client.websocket_connect("/ws") as websocket:
            websocket.send_text("What skills?")
            frames = receive_turn(websocket)

        check.greater(len(frames), 1)
        check.equal("".join(frames), SKILLS_ANSWER)

    def test_answers_several_turns_on_one_connection(
        self, app: FastAPI, client: TestClient
    ) -> None:
        responder = RecordingResponder(["Hello", " there"])
        app.dependency_overrides[get_responder] = lambda: responder

        with client.websocket_connect("/ws") as websocket:
            websocket.send_text("first")
            first = receive_turn(websocket)
            websocket.send_text("second")
            second = receive_turn(websocket)

        check.equal(first, ["Hello", " there"])
        check.equal(second, ["Hello", " there"])
        check.equal([question for question, _ in responder.calls], ["first", "second"])

    def test_unknown_session_answers_without_resume(
        self, app: FastAPI, client: TestClient
    ) -> None:
        responder = RecordingResponder(["ok"])
        app.dependency_overrides[get_responder] = lambda: responder

        with client.websocket_connect("/ws?session_id=missing") as websocket:
            websocket.send_text("What skills?")
            receive_turn(websocket)

        check.equal(responder.calls, [("What skills?", None)])

    def test_responder_failure_sends_error_then_end_token(
        self, app: FastAPI, client: TestClient
    ) -> None:
        responder = RecordingResponder(["partial"], fail_with=RuntimeError("model offline"))
        app.dependency_overrides[get_responder] = lambda: responder

        with client.websocket_connect("/ws") as websocket:
            websocket.send_text("question")
            frames = receive_turn(websocket)

        check.equal(frames, ["partial", "\n\n[Error: model offline]"])

    def test_client_disconnect_is_handled(self, app: FastAPI, client: TestClient) -> None:
        app.dependency_overrides[get_responder] = lambda: RecordingResponder(["x"])

        with client.websocket_connect("/ws") as websocket:
            websocket.close()


class TestUploadThenChat:
    """Upload a resume, then chat about it over the session's socket."""

    def test_resume_text_reaches_responder(
        self, app: FastAPI, client: TestClient, resume_pdf: bytes
    ) -> None:
        responder = RecordingResponder(["Python", " and FastAPI"])
        app.dependency_overrides[get_responder] = lambda: responder

        upload = client.post(
            "/upload", files={"file": ("resume.pdf", resume_pdf, "application/pdf")}
        )
        assert upload.status_code == 200
        session_id = upload.json()["session_id"]

        with client.websocket_connect(f"/ws?session_id={session_id}") as websocket:
            websocket.send_text("What skills?")
            frames = receive_turn(websocket)

        check.equal(frames, ["Python", " and FastAPI"])
        question, resume = responder.calls[0]
        check.equal(question, "What skills?")
        assert resume is not None
        check.is_in("Jane Doe", resume)

    def test_frames_assemble_into_one_assistant_message(
        self, app: FastAPI, client: TestClient, resume_pdf: bytes
    ) -> None:
        """The server's frames drive the client assembler to a single reply."""
        app.dependency_overrides[get_responder] = lambda: SimulatedResponder()
        assembler = StreamingMessageAssembler()

        upload = client.post(
            "/upload", files={"file": ("resume.pdf", resume_pdf, "application/pdf")}
        )
        session_id = upload.json()["session_id"]

        with client.websocket_connect(f"/ws?session_id={session_id}") as websocket:
            assembler.begin_turn("What skills?")
            websocket.send_text("What skills?")
            while True:
                frame = websocket.receive_text()
                assembler.receive(frame)
                if frame == STREAM_END_TOKEN:
                    break

        check.equal([m.role for m in assembler.messages], [Role.USER, Role.ASSISTANT])
        check.equal(assembler.messages[-1].content, SKILLS_ANSWER)
        check.is_false(assembler.is_loading)

    def test_session_is_discarded_when_socket_closes(
        self,
        app: FastAPI,
        client: TestClient,
        resume_pdf: bytes,
        resume_store: ResumeStore,
    ) -> None:
        app.dependency_overrides[get_responder] = lambda: RecordingResponder(["ok"])

        upload = client.post(
            "/upload", files={"file": ("resume.pdf", resume_pdf, "application/pdf")}
        )
        session_id = upload.json()["session_id"]
        check.equal(len(resume_store), 1)

        with client.websocket_connect(f"/ws?session_id={session_id}") as websocket:
            websocket.send_text("What skills?")
            receive_turn(websocket)

        check.equal(len(resume_store), 0)
        check.is_none(resume_store.get(session_id))

    def test_other_sessions_survive_a_closed_socket(
        self,
        app: FastAPI,
        client: TestClient,
        resume_pdf: bytes,
        resume_store: ResumeStore,
    ) -> None:
        app.dependency_overrides[get_responder] = lambda: RecordingResponder(["ok"])
        files = {"file": ("resume.pdf", resume_pdf, "application/pdf")}
        closed = client.post("/upload", files=files).json()["session_id"]
        kept = client.post("/upload", files=files).json()["session_id"]

        with client.websocket_connect(f"/ws?session_id={closed}"):
            pass

        check.is_none(resume_store.get(closed))
        check.is_not_none(resume_store.get(kept))
