"""Inbound adapters - console entry points."""

from docsim.adapters.inbound.cli import build_parser, main
from docsim.adapters.inbound.kv_shell import CommandShell

__all__ = [
    "CommandShell",
    "build_parser",
    "main",
]
