"""Fixed trade-off analysis printed after the measurements.

This is editorial content. It does not depend on any measured value.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisSection:
    """A titled list of points."""

    title: str
    points: tuple[str, ...]


TRADE_OFF_ANALYSIS: tuple[AnalysisSection, ...] = (
    AnalysisSection(
        "PROS of Document-Centric Storage",
        (
            "Schema flexibility - documents can evolve organically",
            "Faster relationship traversal - direct links vs JOINs",
            "Better cache locality - related data stored together",
            "Simpler mental model - documents as living entities",
            "No impedance mismatch - JSON in, JSON out",
            "Organic discovery through tags and links",
            "Self-describing data with metadata",
        ),
    ),
    AnalysisSection(
        "CONS of Document-Centric Storage",
        (
            "Higher memory overhead per document (metadata)",
            "Index duplication (tag_index, link_index)",
            "No ACID guarantees across documents",
            "Potential for inconsistent relationships",
            "Limited query expressiveness vs SQL",
            "Harder to enforce data integrity constraints",
            "May not scale well for highly normalized data",
        ),
    ),
    AnalysisSection(
        "BEST USE CASES",
        (
            "Content management systems",
            "Social networks (posts, users, relationships)",
            "IoT data collection",
            "Rapid prototyping and evolving schemas",
            "Graph-like data with organic relationships",
        ),
    ),
    AnalysisSection(
        "AVOID FOR",
        (
            "Financial transactions (need ACID)",
            "Highly normalized data",
            "Complex analytical queries",
            "Strict data consistency requirements",
        ),
    ),
)
