import sys
import types
from unittest.mock import MagicMock

import pytest


def _install_tkinter_stub() -> None:
    """
    Interpreters built without Tk cannot import tkinter; the dialogs are
    always patched in tests, so a MagicMock-based module is enough there.
    """
    try:
        import tkinter  # noqa: F401
        from tkinter import filedialog, messagebox  # noqa: F401
    except ImportError:
        module = types.ModuleType("tkinter")
        module.Tk = MagicMock(name="Tk")
        module.TclError = type("TclError", (Exception,), {})
        module.filedialog = MagicMock(name="filedialog")
        module.messagebox = MagicMock(name="messagebox")
        sys.modules["tkinter"] = module
        sys.modules["tkinter.filedialog"] = module.filedialog
        sys.modules["tkinter.messagebox"] = module.messagebox


_install_tkinter_stub()


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in ("OCR_TESSERACT_CMD", "OCR_TEMP_DIR", "OCR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    yield
