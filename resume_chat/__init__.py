"""Resume Chat - upload a resume and chat about it with streamed answers.

Combines FastAPI for the upload and WebSocket endpoints, NiceGUI for the
page, websockets and httpx for the client side, and Pydantic for data
validation.

Components:
    - api: Upload endpoint, chat WebSocket, session store
    - agent: Responders that stream answers
    - client: Page controller and streaming message assembly
    - parsing: Resume PDF text extraction
    - ui: NiceGUI views
    - models: Shared schemas
"""

__version__ = "0.1.0"
