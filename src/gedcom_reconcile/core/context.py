from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

from gedcom_reconcile.matching.keys import KeyOptions


@dataclass
class CompareContext:
    """
    Shared pipeline context.
    Carries the two inputs, the optional JSON output and the parse/key options.
    ``None`` options fall back to the configuration.
    """

    config: Any
    logger: Any

    input_a: str
    input_b: str
    output_path: Optional[str] = None

    key_options: Optional[KeyOptions] = None
    close_scopes: Optional[bool] = None
