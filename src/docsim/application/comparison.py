"""Comparison reporter - head-to-head runs across dataset scales.

For each scale the reporter runs the document and relational workloads with
the same seed and query count, then expresses time and memory as ratios of
the larger value to the smaller one, so every ratio is at least 1. The
direction ("FASTER"/"slower", "LESS"/"more") comes from a plain less-than
comparison of the document engine's value against the relational one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from docsim.application.analysis import TRADE_OFF_ANALYSIS, AnalysisSection
from docsim.application.workload import WorkloadDriver, WorkloadResult
from docsim.infrastructure.logging import get_logger, run_context
from docsim.infrastructure.tracing import trace_span

HEAVY_RULE = "=" * 60
LIGHT_RULE = "-" * 50


def ratio(larger: int, smaller: int) -> float:
    """``larger / smaller`` with the denominator floored at 1."""
    return larger / max(smaller, 1)


@dataclass
class ScaleComparison:
    """Both engines' results for one dataset scale."""

    num_records: int
    num_queries: int
    document: WorkloadResult
    relational: WorkloadResult

    @property
    def document_faster(self) -> bool:
        return self.document.total_time_us < self.relational.total_time_us

    @property
    def document_less_memory(self) -> bool:
        return self.document.memory_bytes < self.relational.memory_bytes

    @property
    def time_ratio(self) -> float:
        """Slower total time over faster total time."""
        doc, rel = self.document.total_time_us, self.relational.total_time_us
        return ratio(rel, doc) if self.document_faster else ratio(doc, rel)

    @property
    def memory_ratio(self) -> float:
        """Larger memory estimate over smaller memory estimate."""
        doc, rel = self.document.memory_bytes, self.relational.memory_bytes
        return ratio(rel, doc) if self.document_less_memory else ratio(doc, rel)


@dataclass
class ComparisonReport:
    """All scale comparisons of a run plus the fixed analysis."""

    seed: int
    scales: list[ScaleComparison] = field(default_factory=list)
    analysis: tuple[AnalysisSection, ...] = TRADE_OFF_ANALYSIS


class ComparisonReporter:
    """Runs both engines per scale and builds a ComparisonReport."""

    def __init__(self, driver: WorkloadDriver | None = None) -> None:
        """Initialize with a workload driver."""
        self._driver = driver or WorkloadDriver()
        self._log = get_logger(__name__)

    def compare(self, num_records: int, num_queries: int, seed: int) -> ScaleComparison:
        """Run both engines at one scale."""
        with trace_span("comparison.scale", {"num_records": num_records, "num_queries": num_queries}):
            document = self._driver.run_document(num_records, num_queries, seed)
            relational = self._driver.run_relational(num_records, num_queries, seed)

        comparison = ScaleComparison(
            num_records=num_records,
            num_queries=num_queries,
            document=document,
            relational=relational,
        )
        self._log.info(
            "scale_compared",
            num_records=num_records,
            document_faster=comparison.document_faster,
            time_ratio=round(comparison.time_ratio, 2),
            document_less_memory=comparison.document_less_memory,
            memory_ratio=round(comparison.memory_ratio, 2),
        )
        return comparison

    def run(self, sizes: Sequence[int], num_queries: int, seed: int) -> ComparisonReport:
        """Compare both engines at every scale in ``sizes``, in order."""
        report = ComparisonReport(seed=seed)
        with run_context(seed=seed, num_queries=num_queries):
            for size in sizes:
                report.scales.append(self.compare(size, num_queries, seed))
        return report


def _engine_lines(title: str, result: WorkloadResult) -> list[str]:
    return [
        f"{title}:",
        f"  Total Time: {result.total_time_us} us",
        f"  Memory Usage: {result.memory_bytes} bytes (~{result.memory_kb} KB)",
        f"  Query Hit Rate: {result.hit_rate:.2f}",
    ]


def render_scale(comparison: ScaleComparison) -> list[str]:
    """Console lines for one scale."""
    lines = [
        "",
        f"Testing with {comparison.num_records} documents, {comparison.num_queries} queries:",
        LIGHT_RULE,
    ]
    lines += _engine_lines("Document-Centric Storage", comparison.document)
    lines.append("")
    lines += _engine_lines("Traditional Relational", comparison.relational)
    lines += ["", "Performance Comparison:"]

    if comparison.document_faster:
        lines.append(f"  Document-centric is {comparison.time_ratio:.1f}x FASTER")
    else:
        lines.append(f"  Document-centric is {comparison.time_ratio:.1f}x slower")

    if comparison.document_less_memory:
        lines.append(f"  Document-centric uses {comparison.memory_ratio:.1f}x LESS memory")
    else:
        lines.append(f"  Document-centric uses {comparison.memory_ratio:.1f}x more memory")
    return lines


def render_analysis(sections: Sequence[AnalysisSection] = TRADE_OFF_ANALYSIS) -> list[str]:
    """Console lines for the fixed trade-off analysis."""
    lines = ["", HEAVY_RULE, "ANALYSIS SUMMARY", HEAVY_RULE]
    for section in sections:
        lines += ["", f"{section.title}:"]
        lines += [f"  * {point}" for point in section.points]
    return lines


def render_report(report: ComparisonReport) -> list[str]:
    """Console lines for a full report."""
    lines = ["Document-Centric vs Traditional Storage Simulation", HEAVY_RULE]
    for comparison in report.scales:
        lines += render_scale(comparison)
    lines += render_analysis(report.analysis)
    return lines
