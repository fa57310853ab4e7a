"""Interactive command shell for the key-value store.

A line-oriented interpreter. Each line is split on whitespace; the first
word is the verb (case-insensitive):

    PUT <key> <value...>  Store a value (the rest of the line, space-joined)
    GET <key>             Print the value for a key
    LIST                  Print all keys
    HELP                  Print the command summary
    EXIT | QUIT           Leave the shell

The shell only parses and presents; all storage goes through
KeyValueStorePort.
"""

from __future__ import annotations

import sys
from typing import TextIO

from docsim.infrastructure.logging import get_logger
from docsim.ports.outbound import KeyValueStorePort

PROMPT = "docsim> "

HELP_TEXT = (
    "Available commands:",
    "  PUT <key> <value>  - Store a key-value pair",
    "  GET <key>          - Retrieve value for key",
    "  LIST               - Show all keys",
    "  HELP               - Show this help",
    "  EXIT               - Quit the program",
)


class CommandShell:
    """Read-eval-print loop over a key-value store."""

    def __init__(
        self,
        store: KeyValueStorePort,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        """Initialize the shell.

        Args:
            store: Store the commands operate on
            stdin: Input stream (defaults to sys.stdin)
            stdout: Output stream (defaults to sys.stdout)
        """
        self._store = store
        self._stdin = stdin or sys.stdin
        self._stdout = stdout or sys.stdout
        self._log = get_logger(__name__)

    def run(self) -> None:
        """Run until EXIT/QUIT or end of input."""
        self._print_welcome()
        while True:
            self._stdout.write(PROMPT)
            self._stdout.flush()

            line = self._stdin.readline()
            if not line:
                # End of input behaves like EXIT
                self._println()
                self._handle_exit()
                return

            line = line.strip()
            if not line:
                continue
            if self.handle_command(line):
                return

    def handle_command(self, line: str) -> bool:
        """Execute one command line.

        Returns:
            True if the shell should exit
        """
        parts = line.split()
        verb, args = parts[0].upper(), parts[1:]
        self._log.debug("shell_command", verb=verb, argc=len(args))

        if verb == "PUT" and len(args) >= 2:
            self._handle_put(args[0], " ".join(args[1:]))
        elif verb == "GET" and len(args) == 1:
            self._handle_get(args[0])
        elif verb == "LIST" and not args:
            self._handle_list()
        elif verb == "HELP" and not args:
            self._handle_help()
        elif verb in ("EXIT", "QUIT") and not args:
            self._handle_exit()
            return True
        else:
            self._println("Unknown command. Type HELP for available commands.")
        return False

    def _handle_put(self, key: str, value: str) -> None:
        self._store.put(key, value)
        self._println(f"Stored: {key} = {value}")

    def _handle_get(self, key: str) -> None:
        value = self._store.get(key)
        if value is None:
            self._println(f"Key '{key}' not found")
        else:
            self._println(f"{key}: {value}")

    def _handle_list(self) -> None:
        keys = self._store.keys()
        self._println("All keys in database:")
        if not keys:
            self._println("  (empty)")
        for key in keys:
            self._println(f"  {key}")

    def _handle_help(self) -> None:
        for line in HELP_TEXT:
            self._println(line)

    def _handle_exit(self) -> None:
        self._println("Goodbye from docsim!")

    def _print_welcome(self) -> None:
        self._println("docsim shell - single-threaded key-value store")
        self._println("Commands: PUT <key> <value> | GET <key> | LIST | HELP | EXIT")
        self._println("Example: PUT name Alice")
        self._println()

    def _println(self, text: str = "") -> None:
        self._stdout.write(text + "\n")
