#!/usr/bin/env python3
"""
Place eng.traineddata into the package before building a distribution.

The file is bundled as package data and written to a private tessdata
directory at run time, so the application never downloads anything itself.
The build backend (tools/build_backend.py) calls ``ensure_traineddata``
before every build.

Usage:
    python tools/fetch_traineddata.py [--source URL_OR_PATH] [--force]

Environment variables:
    OCR_TRAINEDDATA_SOURCE  URL or local path of eng.traineddata
                            (default: tessdata_fast on GitHub)
"""
from __future__ import annotations

import argparse
import os
import shutil
import sys
from pathlib import Path

import requests

DEFAULT_SOURCE = "https://github.com/tesseract-ocr/tessdata_fast/raw/main/eng.traineddata"
TARGET = Path(__file__).resolve().parents[1] / "ocr_clipboard" / "data" / "eng.traineddata"


class FetchError(Exception):
    """eng.traineddata could not be placed into the package."""


def default_source() -> str:
    return os.environ.get("OCR_TRAINEDDATA_SOURCE", DEFAULT_SOURCE)


def is_present(target: Path = TARGET) -> bool:
    return target.is_file() and target.stat().st_size > 0


def fetch(source: str, target: Path = TARGET) -> int:
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        if source.startswith(("http://", "https://")):
            print(f"[fetch] downloading {source}", file=sys.stderr)
            response = requests.get(source, timeout=60)
            response.raise_for_status()
            target.write_bytes(response.content)
        else:
            print(f"[fetch] copying {source}", file=sys.stderr)
            shutil.copyfile(source, target)
    except (requests.RequestException, OSError) as exc:
        raise FetchError(f"fetching {source}: {exc}") from exc

    size = target.stat().st_size
    if size == 0:
        target.unlink()
        raise FetchError(f"fetching {source}: file is empty")
    return size


def ensure_traineddata(source: str | None = None, force: bool = False, target: Path = TARGET) -> Path:
    """Return ``target`` once it holds a non-empty trained data file."""
    if is_present(target) and not force:
        print(f"[fetch] already present: {target}", file=sys.stderr)
        return target
    size = fetch(source or default_source(), target)
    print(f"[fetch] wrote {size} bytes to {target}", file=sys.stderr)
    return target


def main() -> None:
    parser = argparse.ArgumentParser(description="Bundle eng.traineddata")
    parser.add_argument(
        "--source",
        default=default_source(),
        help="URL or local path of eng.traineddata.",
    )
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file.")
    args = parser.parse_args()

    try:
        ensure_traineddata(args.source, force=args.force)
    except FetchError as exc:
        raise SystemExit(f"[fetch] {exc}")


if __name__ == "__main__":
    main()
