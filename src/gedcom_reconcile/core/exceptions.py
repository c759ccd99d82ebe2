from pathlib import Path
from typing import Union


class PipelineError(Exception):
    """Base exception for comparison pipeline failures."""


class NoIndividualsError(PipelineError):
    """Raised when a file parses cleanly but contains no INDI records."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(
            f"{self.path.name}: file loaded, but no individuals were found. Check the file format."
        )


class ComparisonExecutionError(PipelineError):
    """Raised when reconciliation or export fails unexpectedly."""
