"""Native dialogs: file picker and message boxes."""

from __future__ import annotations

import tkinter as tk
from contextlib import contextmanager
from pathlib import Path
from tkinter import filedialog, messagebox
from typing import Iterator, Optional, Sequence

from .errors import DialogError


@contextmanager
def _hidden_root(action: str) -> Iterator[tk.Tk]:
    """Yield an invisible topmost root so dialogs do not show an empty window.

    Tk failures (no display, broken Tcl install) become ``DialogError``
    carrying ``action`` as context.
    """
    try:
        root = tk.Tk()
    except tk.TclError as exc:
        raise DialogError(action) from exc
    try:
        root.withdraw()
        root.attributes("-topmost", True)
        yield root
    except tk.TclError as exc:
        raise DialogError(action) from exc
    finally:
        root.destroy()


def pick_file(extensions: Sequence[str], title: str) -> Optional[Path]:
    """Show a modal file picker limited to ``extensions``; None on cancel."""
    patterns = " ".join(f"*.{ext}" for ext in extensions)
    with _hidden_root("showing file picker") as root:
        selected = filedialog.askopenfilename(
            parent=root,
            title=title,
            filetypes=[("Image", patterns)],
        )
    if not selected:
        return None
    return Path(selected)


def show_info(message: str, title: str) -> None:
    with _hidden_root("showing message box") as root:
        messagebox.showinfo(title, message, parent=root)


def ask_yes_no(message: str, title: str) -> bool:
    """Return True only when the user explicitly answers yes."""
    with _hidden_root("showing confirmation prompt") as root:
        answer = messagebox.askyesno(title, message, parent=root)
    return bool(answer)
