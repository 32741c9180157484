"""NiceGUI resume chat page.

Wires the view components to a per-page ResumeChatController. The page
shows the upload view until a resume is accepted, then the chat view.
"""

import os

from nicegui import background_tasks, events, ui

from resume_chat.client.composer import InputComposer
from resume_chat.client.controller import ResumeChatController
from resume_chat.models.schemas import Notification, ResumeFile
from resume_chat.ui.components import (
    CUSTOM_CSS,
    chat_container,
    chat_input,
    header,
    resume_upload,
)


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    shown = {"has_resume": False}
    scroll: dict[str, ui.scroll_area] = {}

    def notify(notification: Notification) -> None:
        with root:
            ui.notify(
                notification.title,
                caption=notification.description,
                type="negative" if notification.destructive else "positive",
            )

    def on_change() -> None:
        header_view.refresh()
        if controller.has_resume != shown["has_resume"]:
            main_view.refresh()
        else:
            messages_view.refresh()

    controller = ResumeChatController(notify=notify, on_change=on_change)
    composer = InputComposer(
        on_send=lambda text: background_tasks.create(
            controller.send_message(text), name="send-message"
        )
    )
    ui.context.client.on_disconnect(controller.close)

    async def handle_upload(e: events.UploadEventArguments) -> None:
        file = ResumeFile(
            name=e.file.name,
            content_type=e.file.content_type,
            content=await e.file.read(),
        )
        if not await controller.upload(file):
            e.sender.reset()

    async def submit() -> None:
        composer.submit(is_loading=controller.is_loading, disabled=not controller.has_resume)

    async def handle_key(e: events.GenericEventArguments) -> None:
        composer.handle_key(
            e.args.get("key", ""),
            shift=bool(e.args.get("shiftKey")),
            is_loading=controller.is_loading,
            disabled=not controller.has_resume,
        )

    @ui.refreshable
    def header_view() -> None:
        name = controller.uploaded_file.name if controller.uploaded_file else None
        header(name)

    @ui.refreshable
    def messages_view() -> None:
        chat_container(controller.messages, controller.is_loading)
        if "area" in scroll:
            scroll["area"].scroll_to(percent=1.0)

    @ui.refreshable
    def main_view() -> None:
        shown["has_resume"] = controller.has_resume
        if not controller.has_resume:
            with ui.column().classes("w-full flex-grow items-center justify-center p-6"):
                with ui.column().classes("w-full max-w-lg items-center gap-2 mb-6"):
                    ui.label("Chat with your Resume").classes("text-3xl font-bold")
                    ui.label(
                        "Upload your resume and ask any questions about it. "
                        "Get instant, intelligent insights."
                    ).classes("text-gray-500 text-center")
                resume_upload(None, handle_upload, controller.remove_file)
            return

        with ui.row().classes("w-full px-5 pt-4"):
            resume_upload(controller.uploaded_file, handle_upload, controller.remove_file)
        with ui.scroll_area().classes("flex-grow w-full bg-gray-50") as area:
            scroll["area"] = area
            with ui.column().classes("w-full p-5 gap-6"):
                messages_view()
        with ui.row().classes("w-full p-4 bg-white border-t"):
            textarea, send_btn = chat_input(
                composer, "buffer", submit, handle_key, disabled=not controller.has_resume
            )
            textarea.bind_enabled_from(controller, "is_loading", backward=lambda busy: not busy)
            send_btn.bind_enabled_from(controller, "is_loading", backward=lambda busy: not busy)

    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-4xl mx-auto app-container gap-0").style(
            "height: calc(100vh - 4rem)"
        ) as root,
    ):
        header_view()
        main_view()


def main() -> None:
    ui.run(
        title="ResumeChat",
        port=int(os.getenv("UI_PORT", "8080")),
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "resume-chat-secret"),
    )


if __name__ == "__main__":
    main()
