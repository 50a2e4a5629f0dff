"""Narrative summaries of ranked comparisons"""

from .prompt import build_summary_prompt
from .summary import FALLBACK_SUMMARY, SummaryGenerator

__all__ = ["build_summary_prompt", "FALLBACK_SUMMARY", "SummaryGenerator"]
