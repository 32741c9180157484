"""NiceGUI view components for the resume chat page.

Each function renders into the current NiceGUI container from the values
it is given. None of them hold session state.
"""

from collections.abc import Awaitable, Callable

from nicegui import events, ui

from resume_chat.client.uploader import ACCEPTED_EXTENSIONS
from resume_chat.models.schemas import Message, ResumeFile
from resume_chat.ui.formatting import format_timestamp, markdown_to_html, plain_to_html

SUGGESTIONS = (
    "What are the key skills?",
    "Summarize the experience",
    "What's the education background?",
)

CUSTOM_CSS = """
<style>
    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .message-user {
        background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
        color: white;
        border-radius: 18px 4px 18px 18px;
    }

    .message-assistant {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 4px 18px 18px 18px;
    }

    .avatar-user { background: rgba(102, 126, 234, 0.2); }
    .avatar-assistant { background: linear-gradient(135deg, #667eea 0%, #764ba2 100%); }

    .typing-dot {
        width: 8px; height: 8px;
        background: #667eea;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .input-box {
        background: #f9fafb;
        border: 1px solid #e5e7eb;
        border-radius: 12px;
    }
    .input-box:focus-within { border-color: #667eea; }
</style>
"""


def header(file_name: str | None) -> None:
    """App title, and a badge with the resume name once one is uploaded."""
    with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("auto_awesome").classes("text-white text-3xl")
            with ui.column().classes("gap-0"):
                ui.label("ResumeChat").classes("text-lg font-semibold text-white")
                ui.label("AI-powered resume analysis").classes("text-xs text-white/70")
        if file_name:
            with ui.row().classes("bg-white/20 rounded-lg px-3 py-1 items-center gap-2"):
                ui.icon("description").classes("text-white text-sm")
                ui.label(file_name).classes("text-sm text-white/90 truncate max-w-[150px]")


def resume_upload(
    uploaded_file: ResumeFile | None,
    on_upload: Callable[[events.UploadEventArguments], Awaitable[None]],
    on_remove: Callable[[], Awaitable[None]],
) -> None:
    """Drop zone for picking a resume, or a card for the uploaded one."""
    if uploaded_file is not None:
        with ui.row().classes("w-full max-w-md mx-auto p-6 items-center gap-4 app-container"):
            ui.icon("description").classes("text-3xl text-indigo-500")
            with ui.column().classes("flex-grow gap-0 min-w-0"):
                ui.label(uploaded_file.name).classes("font-medium truncate")
                ui.label(uploaded_file.size_kb).classes("text-sm text-gray-500")
            ui.button(icon="close", on_click=on_remove).props("flat round")
        return

    with ui.column().classes("w-full items-center gap-2"):
        ui.upload(
            label="Upload your resume",
            on_upload=on_upload,
            auto_upload=True,
            max_files=1,
        ).props(f'accept="{ACCEPTED_EXTENSIONS}" flat bordered').classes("w-full")
        ui.label("Drag & drop or click to browse").classes("text-sm text-gray-500")
        ui.label("Supports PDF").classes("text-xs text-gray-400")


def _avatar(is_user: bool) -> None:
    css = "avatar-user" if is_user else "avatar-assistant"
    icon = "person" if is_user else "auto_awesome"
    color = "text-indigo-500" if is_user else "text-white"
    with ui.element("div").classes(
        f"w-10 h-10 rounded-xl flex items-center justify-center {css}"
    ):
        ui.icon(icon).classes(f"{color} text-lg")


def chat_message(message: Message) -> None:
    """One history entry: avatar, bubble, and time."""
    is_user = message.is_user
    direction = "flex-row-reverse" if is_user else "flex-row"
    bubble = "message-user" if is_user else "message-assistant"
    content = plain_to_html(message.content) if is_user else markdown_to_html(message.content)

    with ui.row().classes(f"w-full {direction} gap-4 items-start no-wrap"):
        _avatar(is_user)
        with ui.element("div").classes(f"max-w-[75%] px-5 py-3 {bubble}"):
            ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
            ui.label(format_timestamp(message.timestamp)).classes("text-[10px] opacity-60 mt-2")


def typing_indicator() -> None:
    with ui.row().classes("w-full gap-4 items-start"):
        _avatar(False)
        with ui.element("div").classes("message-assistant px-5 py-4"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")


def chat_container(messages: tuple[Message, ...], is_loading: bool) -> None:
    """Message list with typing indicator, or a welcome panel when empty."""
    if not messages and not is_loading:
        with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
            ui.icon("auto_awesome").classes("text-5xl text-indigo-300")
            ui.label("Ready to Chat").classes("text-xl font-semibold")
            ui.label("Ask anything about the uploaded resume").classes("text-gray-500")
            with ui.row().classes("gap-2 justify-center max-w-md"):
                for suggestion in SUGGESTIONS:
                    ui.label(suggestion).classes(
                        "px-3 py-1.5 rounded-full text-sm bg-gray-100 text-gray-500"
                    )
        return

    for message in messages:
        chat_message(message)
    if is_loading:
        typing_indicator()


ENTER_KEY_HANDLER = """(e) => {
    if (e.key !== "Enter") return;
    if (!e.shiftKey) e.preventDefault();
    emit({key: e.key, shiftKey: e.shiftKey});
}"""


def chat_input(
    target: object,
    value_name: str,
    on_submit: Callable[[], Awaitable[None]],
    on_key: Callable[[events.GenericEventArguments], Awaitable[None]],
    disabled: bool,
) -> tuple[ui.textarea, ui.button]:
    """Textarea bound to ``target.value_name`` plus a send button.

    Enter presses are passed to ``on_key`` with ``key`` and ``shiftKey``; the
    browser only inserts a newline when Shift is held.
    """
    placeholder = (
        "Upload a resume to start chatting..." if disabled else "Ask about the resume..."
    )
    with ui.column().classes("w-full gap-1"):
        with ui.row().classes("w-full gap-3 items-end no-wrap"):
            with ui.element("div").classes("flex-grow input-box px-3 py-2"):
                textarea = (
                    ui.textarea(placeholder=placeholder)
                    .props("autogrow borderless dense rows=1")
                    .classes("w-full")
                    .bind_value(target, value_name)
                    .on("keydown", on_key, js_handler=ENTER_KEY_HANDLER)
                )
            send_btn = ui.button(icon="send", on_click=on_submit).props(
                "round unelevated color=indigo"
            )
        ui.label("Press Enter to send, Shift + Enter for new line").classes(
            "w-full text-xs text-gray-400 text-center"
        )
    if disabled:
        textarea.disable()
        send_btn.disable()
    return textarea, send_btn
