#!/usr/bin/env python3
"""Helpers for resolving where generated decks are written."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

__all__ = ["ensure_pptx_suffix", "resolve_output_path"]

PPTX_SUFFIX = ".pptx"


def ensure_pptx_suffix(output_path: str | Path) -> Path:
    """Append ``.pptx`` unless the path already ends with it."""
    path = Path(output_path).expanduser()
    if path.suffix.lower() != PPTX_SUFFIX:
        path = path.with_name(path.name + PPTX_SUFFIX)
    return path


def resolve_output_path(output_path: str | Path, *, output_dir: Optional[str | Path] = None) -> Path:
    """Return the absolute path a deck should be written to.

    Rules
    -----
    1. A missing ``.pptx`` extension is appended.
    2. A bare file name is placed inside *output_dir* when one is given.
    3. The parent directory is created if needed.
    """
    path = ensure_pptx_suffix(output_path)

    if output_dir is not None and not path.is_absolute() and len(path.parts) == 1:
        path = Path(output_dir).expanduser() / path

    path = path.resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
