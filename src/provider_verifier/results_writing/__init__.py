"""Results writing domain exports."""

from .comparison_report import render_comparison_report

__all__ = ["render_comparison_report"]
