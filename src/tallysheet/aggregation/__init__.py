"""Timesheet aggregation engine."""

from .summary_aggregator import SummaryAggregator, build_summary

__all__ = ["SummaryAggregator", "build_summary"]
