"""Main application entry point.

Runs FastAPI (port 8000) with the NiceGUI chat page mounted on the same server.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /upload, /ws and /health; NiceGUI serves the page at /.
    """
    import uvicorn
    from nicegui import ui

    from resume_chat.api.app import create_app
    from resume_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="ResumeChat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "resume-chat-secret"),
    )

    port = int(os.getenv("PORT", "8000"))
    logger.info(f"Starting integrated server on http://localhost:{port}")
    logger.info(f"API docs available at http://localhost:{port}/docs")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_separate() -> None:
    """Run FastAPI and NiceGUI as separate processes.

    FastAPI on PORT (8000), NiceGUI on UI_PORT (8080). Stops both as soon as
    either one exits.
    """
    import subprocess
    import time

    port = os.getenv("PORT", "8000")
    logger.info(f"Starting FastAPI on http://localhost:{port}")
    logger.info(f"Starting NiceGUI on http://localhost:{os.getenv('UI_PORT', '8080')}")

    api_proc = subprocess.Popen(
        [
            sys.executable,
            "-m",
            "uvicorn",
            "resume_chat.api.app:app",
            "--host",
            os.getenv("HOST", "0.0.0.0"),
            "--port",
            port,
        ]
    )
    ui_proc = subprocess.Popen(
        [sys.executable, "-c", "from resume_chat.ui.chat_page import main; main()"]
    )

    try:
        while api_proc.poll() is None and ui_proc.poll() is None:
            time.sleep(1)
        logger.warning("A server process exited, stopping the other")
    except KeyboardInterrupt:
        logger.info("Shutting down servers...")
    finally:
        api_proc.terminate()
        ui_proc.terminate()
        api_proc.wait()
        ui_proc.wait()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=separate to run FastAPI and NiceGUI on different ports.
    Default is integrated mode (both on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Resume Chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
