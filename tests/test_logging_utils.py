import logging

from ocr_clipboard import logging_utils


def test_module_loggers_share_the_package_handler():
    root = logging_utils.get_logger()
    child = logging_utils.get_logger("ocr_clipboard.acquire")

    assert child.name == "ocr_clipboard.acquire"
    assert child.parent is root
    assert len(root.handlers) == 1
    assert root.propagate is False


def test_set_level_reaches_children():
    child = logging_utils.get_logger("ocr_clipboard.ocr")
    try:
        logging_utils.set_level("debug")
        assert child.getEffectiveLevel() == logging.DEBUG
    finally:
        logging_utils.set_level("INFO")
    assert child.getEffectiveLevel() == logging.INFO
