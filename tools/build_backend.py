"""setuptools build backend that bundles eng.traineddata first.

Wheels and sdists are refused when the trained data cannot be placed into
``ocr_clipboard/data``; an installed package without it can never run OCR.
Editable installs only warn, so a development checkout stays installable
until ``tools/fetch_traineddata.py`` has been run.
"""
from __future__ import annotations

import sys

from setuptools import build_meta as _setuptools
from setuptools.build_meta import (  # noqa: F401
    get_requires_for_build_editable,
    get_requires_for_build_sdist,
    get_requires_for_build_wheel,
    prepare_metadata_for_build_editable,
    prepare_metadata_for_build_wheel,
)

import fetch_traineddata


def _bundle_traineddata(required: bool) -> None:
    try:
        fetch_traineddata.ensure_traineddata()
    except fetch_traineddata.FetchError as exc:
        if required:
            raise RuntimeError(
                f"eng.traineddata must be bundled before building ({exc}); "
                "run tools/fetch_traineddata.py --source PATH_OR_URL"
            ) from exc
        print(f"[build] WARNING: eng.traineddata not bundled: {exc}", file=sys.stderr)


def build_wheel(wheel_directory, config_settings=None, metadata_directory=None):
    _bundle_traineddata(required=True)
    return _setuptools.build_wheel(wheel_directory, config_settings, metadata_directory)


def build_sdist(sdist_directory, config_settings=None):
    _bundle_traineddata(required=True)
    return _setuptools.build_sdist(sdist_directory, config_settings)


def build_editable(wheel_directory, config_settings=None, metadata_directory=None):
    _bundle_traineddata(required=False)
    return _setuptools.build_editable(wheel_directory, config_settings, metadata_directory)
