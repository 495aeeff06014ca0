"""SystemClipboard: reads text from the desktop clipboard via pyperclip."""

import pyperclip

from playground.errors import ClipboardUnavailableError


class SystemClipboard:
    """Reads the current clipboard text.

    An empty or non-text clipboard reads as an empty string.
    """

    def read(self) -> str:
        try:
            text = pyperclip.paste()
        except pyperclip.PyperclipException as error:
            raise ClipboardUnavailableError(str(error)) from error
        return text or ""
