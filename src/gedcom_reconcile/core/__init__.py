from .context import CompareContext
from .exceptions import ComparisonExecutionError, NoIndividualsError, PipelineError
from .pipeline import ComparisonPipeline, ComparisonReport, compare_files

__all__ = [
    "CompareContext",
    "ComparisonExecutionError",
    "ComparisonPipeline",
    "ComparisonReport",
    "NoIndividualsError",
    "PipelineError",
    "compare_files",
]
