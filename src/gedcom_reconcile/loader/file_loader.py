from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_reconcile.logging import get_logger

log = get_logger(__name__)


def read_gedcom_text(path: Union[str, Path]) -> str:
    """
    Read a GEDCOM file as text.

    Undecodable bytes (ANSEL, cp1252 exports) are replaced, not rejected.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8", errors="replace") as f:
        text = f.read()

    log.info(f"Loaded file: {file_path} ({len(text)} chars)")
    return text
