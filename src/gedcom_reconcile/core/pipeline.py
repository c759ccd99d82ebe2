from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

from gedcom_reconcile.config import get_config
from gedcom_reconcile.core.context import CompareContext
from gedcom_reconcile.core.exceptions import (
    ComparisonExecutionError,
    NoIndividualsError,
    PipelineError,
)
from gedcom_reconcile.exporter import export_report_json
from gedcom_reconcile.loader.file_locator import resolve_input_path
from gedcom_reconcile.logging import get_logger
from gedcom_reconcile.matching import KeyOptions, ReconciliationResult, reconcile
from gedcom_reconcile.records import IndividualRecord, load_individuals


@dataclass
class ComparisonReport:
    """Everything a caller needs to present one comparison run."""

    path_a: Path
    path_b: Path
    records_a: Tuple[IndividualRecord, ...]
    records_b: Tuple[IndividualRecord, ...]
    result: ReconciliationResult
    options: KeyOptions


class ComparisonPipeline:
    """
    Orchestrates load -> parse -> reconcile -> export for two GEDCOM files.
    No matching logic lives here.
    """

    def __init__(self, context: CompareContext):
        self.ctx = context
        self.log = context.logger

    def _options(self) -> KeyOptions:
        if self.ctx.key_options is not None:
            return self.ctx.key_options
        return self.ctx.config.key_options()

    def run(self) -> ComparisonReport:
        self.log.info("Comparison pipeline starting")

        path_a = resolve_input_path(self.ctx.input_a)
        path_b = resolve_input_path(self.ctx.input_b)

        try:
            close_scopes = self.ctx.config.close_scopes(self.ctx.close_scopes)
            records_a = load_individuals(path_a, close_scopes=close_scopes)
            records_b = load_individuals(path_b, close_scopes=close_scopes)

            for path, records in ((path_a, records_a), (path_b, records_b)):
                if not records:
                    raise NoIndividualsError(path)

            options = self._options()
            result = reconcile(records_a, records_b, options)
            report = ComparisonReport(
                path_a=path_a,
                path_b=path_b,
                records_a=records_a,
                records_b=records_b,
                result=result,
                options=options,
            )

            self.log.info(f"Counts: {result.counts.as_dict()}")

            if self.ctx.output_path:
                export_report_json(report, self.ctx.output_path)

            self.log.info("Comparison pipeline completed successfully")
            return report

        except PipelineError:
            raise
        except Exception as exc:
            self.log.exception("Comparison pipeline failed")
            raise ComparisonExecutionError(str(exc)) from exc


def compare_files(
    path_a: Union[str, Path],
    path_b: Union[str, Path],
    options: Optional[KeyOptions] = None,
    output_path: Union[str, Path, None] = None,
    close_scopes: Optional[bool] = None,
) -> ComparisonReport:
    """Compare two GEDCOM files with the project configuration."""
    cfg = get_config()
    ctx = CompareContext(
        config=cfg,
        logger=get_logger("pipeline"),
        input_a=str(path_a),
        input_b=str(path_b),
        output_path=str(output_path) if output_path else None,
        key_options=options,
        close_scopes=close_scopes,
    )
    return ComparisonPipeline(ctx).run()
