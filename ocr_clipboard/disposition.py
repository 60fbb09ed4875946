"""Offer the recognized text to the user and copy it on confirmation."""

from __future__ import annotations

from . import clipboard, dialogs, logging_utils

_LOGGER = logging_utils.get_logger(__name__)

PROMPT_HEADER = "Copy to clipboard?"
RESULT_TITLE = "OCR Recognized Result"


def offer_result(text: str) -> bool:
    """Ask whether to copy ``text``; return True when it was copied.

    ``ClipboardWriteError`` from the copy propagates: the user already
    accepted the text, so a failed copy must not pass silently.
    """
    prompt = f"{PROMPT_HEADER}\n\n{text}"
    if not dialogs.ask_yes_no(prompt, RESULT_TITLE):
        _LOGGER.info("Result discarded")
        return False

    clipboard.write_text(text)
    _LOGGER.info("Copied result to clipboard")
    return True
