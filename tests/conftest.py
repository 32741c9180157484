"""Pytest fixtures and shared test configuration.

Fixtures:
    - make_pdf: Builds small, valid PDFs with real text in memory
    - resume_pdf: A one-page resume PDF
    - resume_store: Fresh ResumeStore
    - app: FastAPI app wired to the fresh store
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator, Callable

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from resume_chat.api.app import create_app
from resume_chat.api.sessions import ResumeStore, get_resume_store

RESUME_LINES = ["Jane Doe", "Senior Python Developer", "Skills: FastAPI, asyncio"]


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(pages: list[list[str]], title: str | None = None) -> bytes:
    """Write a minimal PDF with one Helvetica text block per page.

    Object offsets are computed exactly so the xref table is valid.
    """
    objects: list[bytes] = []
    info_ref = b""

    page_count = len(pages)
    kids = " ".join(f"{4 + 2 * i} 0 R" for i in range(page_count))
    objects.append(b"<< /Type /Catalog /Pages 2 0 R >>")
    objects.append(f"<< /Type /Pages /Kids [{kids}] /Count {page_count} >>".encode())
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    for i, lines in enumerate(pages):
        content_id = 5 + 2 * i
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {content_id} 0 R >>"
            ).encode()
        )
        text_ops = " ".join(f"({_escape(line)}) Tj T*" for line in lines)
        stream = f"BT /F1 12 Tf 14 TL 72 720 Td {text_ops} ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    if title is not None:
        objects.append(f"<< /Title ({_escape(title)}) /Author (Jane Doe) >>".encode())
        info_ref = b" /Info %d 0 R" % len(objects)

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R%s >>\n" % (len(objects) + 1, info_ref)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_offset
    return bytes(out)


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Return the PDF builder."""
    return build_pdf


@pytest.fixture
def resume_pdf() -> bytes:
    """One-page resume PDF with extractable text."""
    return build_pdf([RESUME_LINES], title="Jane Doe Resume")


@pytest.fixture
def resume_store() -> ResumeStore:
    return ResumeStore()


@pytest.fixture
def app(resume_store: ResumeStore) -> FastAPI:
    """FastAPI app using an isolated resume store."""
    application = create_app()
    application.dependency_overrides[get_resume_store] = lambda: resume_store
    return application


@pytest.fixture
async def async_client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
