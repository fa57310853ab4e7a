"""Application layer for the storage simulation.

The application layer orchestrates the domain services into benchmark runs.

Exports:
    Workload:
        - WorkloadDriver: Generation and query phases against either engine
        - WorkloadResult: Measurements of one engine run
        - SyntheticRecord, synthesize_records: Shared record stream
        - QueryKind: Kinds of queries issued
        - QueryTally: Per-kind counts of one query phase
    Comparison:
        - ComparisonReporter: Head-to-head runs across scales
        - ComparisonReport, ScaleComparison: Results
        - render_report: Console rendering
        - TRADE_OFF_ANALYSIS: Fixed qualitative analysis
"""

from docsim.application.analysis import TRADE_OFF_ANALYSIS, AnalysisSection
from docsim.application.comparison import (
    ComparisonReport,
    ComparisonReporter,
    ScaleComparison,
    render_report,
)
from docsim.application.workload import (
    DOCUMENT_ENGINE,
    RELATIONAL_ENGINE,
    QueryKind,
    QueryTally,
    SyntheticRecord,
    WorkloadDriver,
    WorkloadResult,
    synthesize_records,
)

__all__ = [
    "WorkloadDriver",
    "WorkloadResult",
    "SyntheticRecord",
    "synthesize_records",
    "QueryKind",
    "QueryTally",
    "DOCUMENT_ENGINE",
    "RELATIONAL_ENGINE",
    "ComparisonReporter",
    "ComparisonReport",
    "ScaleComparison",
    "render_report",
    "TRADE_OFF_ANALYSIS",
    "AnalysisSection",
]
