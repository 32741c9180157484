"""Pending-text buffer behind the chat input box."""

from collections.abc import Callable


class InputComposer:
    """Holds the text being typed and decides when it may be sent.

    Args:
        on_send: Called with the trimmed text on a successful submit.
    """

    def __init__(self, on_send: Callable[[str], object]) -> None:
        self._on_send = on_send
        self.buffer = ""

    def can_submit(self, is_loading: bool = False, disabled: bool = False) -> bool:
        return bool(self.buffer.strip()) and not is_loading and not disabled

    def submit(self, is_loading: bool = False, disabled: bool = False) -> str | None:
        """Send the buffer if it is non-blank and sending is allowed.

        Returns:
            The text handed to the send callback, or None if nothing was sent.
        """
        if not self.can_submit(is_loading, disabled):
            return None
        text = self.buffer.strip()
        self._on_send(text)
        self.buffer = ""
        return text

    def handle_key(
        self,
        key: str,
        shift: bool = False,
        is_loading: bool = False,
        disabled: bool = False,
    ) -> bool:
        """React to a key press in the input box.

        Enter without Shift submits; Shift+Enter is left to the textarea.

        Returns:
            True if the key was consumed.
        """
        if key != "Enter" or shift:
            return False
        self.submit(is_loading, disabled)
        return True
