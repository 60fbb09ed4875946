"""CLI entry point for the OCR clipboard application."""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from . import acquire, config, dialogs, disposition, errors, logging_utils, materialize, ocr

_LOGGER = logging_utils.get_logger(__name__)

NO_IMAGE_MESSAGE = "No image selected. Exiting."
NO_IMAGE_TITLE = "OCR"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ocr-clipboard",
        description=(
            "Recognize text in an image with Tesseract and offer it on the clipboard. "
            "Without IMAGE the clipboard image is used, then a file picker."
        ),
    )
    parser.add_argument("image", nargs="?", help="Path to an image file to OCR.")
    return parser


def run(image_arg: Optional[str], cfg: config.AppConfig) -> int:
    """Acquire, recognize and offer the result; return the exit status."""
    source = acquire.acquire_source(image_arg)
    if source is None:
        _LOGGER.info("No image selected")
        dialogs.show_info(NO_IMAGE_MESSAGE, NO_IMAGE_TITLE)
        return 0

    with materialize.materialize(source, temp_dir=cfg.temp_dir) as image:
        _LOGGER.info("Running OCR on %s", image.path)
        text = ocr.recognize_file(
            image.path, tesseract_cmd=cfg.tesseract_cmd, temp_dir=cfg.temp_dir
        )
        disposition.offer_result(text)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    cfg = config.load_config()
    logging_utils.set_level(cfg.log_level)

    try:
        return run(args.image, cfg)
    except errors.OcrClipboardError as exc:
        _LOGGER.debug("Traceback:", exc_info=True)
        _LOGGER.error("OCR workflow failed: %s", errors.describe(exc))
        return 1


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
