"""
Exporter package.

Re-exports the JSON entry points used by the pipeline and the CLI.
"""

from __future__ import annotations

from .json_exporter import build_report_dict, export_report_json, report_to_json

__all__ = ["build_report_dict", "export_report_json", "report_to_json"]
