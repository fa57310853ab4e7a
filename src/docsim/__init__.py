"""
docsim - Document-centric vs relational storage simulation

A deterministic micro-benchmark harness that drives an in-memory document
store and an in-memory relational store with identical synthetic workloads
and compares timing, estimated memory, and query hit-rate.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
