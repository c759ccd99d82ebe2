"""
File Locator

Resolves absolute, validated paths to input GEDCOM files.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from gedcom_reconcile.logging import get_logger

log = get_logger(__name__)

GEDCOM_SUFFIX = ".ged"


def resolve_input_path(path: Union[str, Path]) -> Path:
    """
    Convert a user-provided path into an absolute, validated file path.

    Raises:
        FileNotFoundError: the path does not exist.
        ValueError: the path exists but is not a regular file.
    """
    abs_path = Path(path).expanduser().resolve()
    log.debug(f"Resolving input file: {abs_path}")

    if not abs_path.exists():
        log.error(f"Input file does not exist: {abs_path}")
        raise FileNotFoundError(f"Input file not found: {abs_path}")

    if not abs_path.is_file():
        log.error(f"Input path is not a file: {abs_path}")
        raise ValueError(f"Input path is not a file: {abs_path}")

    if abs_path.suffix.lower() != GEDCOM_SUFFIX:
        log.warning(f"Input file does not have a {GEDCOM_SUFFIX} extension: {abs_path}")

    return abs_path
