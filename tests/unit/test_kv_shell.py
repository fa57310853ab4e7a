"""Unit tests for the key-value store and its command shell."""

from __future__ import annotations

import io

import pytest

from docsim.adapters.inbound.kv_shell import PROMPT, CommandShell
from docsim.domain.services import KeyValueStore
from docsim.ports.outbound import KeyValueStorePort


def run_shell(script: str, store: KeyValueStore | None = None) -> list[str]:
    """Feed ``script`` to a shell and return its output lines, prompts removed."""
    stdout = io.StringIO()
    CommandShell(store if store is not None else KeyValueStore(), stdin=io.StringIO(script), stdout=stdout).run()
    return [line.replace(PROMPT, "") for line in stdout.getvalue().splitlines()]


@pytest.mark.unit
class TestKeyValueStore:
    """Tests for KeyValueStore."""

    def test_implements_port(self) -> None:
        assert isinstance(KeyValueStore(), KeyValueStorePort)

    def test_put_get_overwrite(self) -> None:
        store = KeyValueStore()
        store.put("name", "Alice")
        store.put("name", "Bob")

        assert store.get("name") == "Bob"
        assert store.get("missing") is None
        assert len(store) == 1

    def test_keys_in_insertion_order(self) -> None:
        store = KeyValueStore()
        for key in ("b", "a", "c"):
            store.put(key, key.upper())

        assert store.keys() == ["b", "a", "c"]


@pytest.mark.unit
class TestCommandShell:
    """Tests for CommandShell."""

    def test_put_then_get(self) -> None:
        lines = run_shell("PUT name Alice\nGET name\nEXIT\n")

        assert "Stored: name = Alice" in lines
        assert "name: Alice" in lines
        assert lines[-1] == "Goodbye from docsim!"

    def test_value_keeps_inner_words(self) -> None:
        """The value is the remaining words joined by single spaces."""
        lines = run_shell("PUT greeting hello    big world\nGET greeting\nQUIT\n")

        assert "Stored: greeting = hello big world" in lines
        assert "greeting: hello big world" in lines

    def test_missing_key(self) -> None:
        lines = run_shell("GET nope\nEXIT\n")
        assert "Key 'nope' not found" in lines

    def test_verbs_are_case_insensitive(self) -> None:
        store = KeyValueStore()
        lines = run_shell("put k v\nget k\nexit\n", store)

        assert "k: v" in lines
        assert store.get("k") == "v"

    @pytest.mark.parametrize("command", ["PUT onlykey", "GET", "GET a b", "FLY away", "EXIT now"])
    def test_malformed_commands(self, command: str) -> None:
        lines = run_shell(f"{command}\nEXIT\n")
        assert "Unknown command. Type HELP for available commands." in lines

    def test_list(self) -> None:
        lines = run_shell("LIST\nPUT a 1\nPUT b 2\nLIST\nEXIT\n")

        first = lines.index("All keys in database:")
        assert lines[first + 1] == "  (empty)"
        second = lines.index("All keys in database:", first + 1)
        assert lines[second + 1 : second + 3] == ["  a", "  b"]

    def test_help(self) -> None:
        lines = run_shell("HELP\nEXIT\n")
        assert "Available commands:" in lines

    def test_blank_lines_ignored(self) -> None:
        lines = run_shell("\n   \nEXIT\n")
        assert not any(line.startswith("Unknown command") for line in lines)

    def test_end_of_input_exits(self) -> None:
        """EOF behaves like EXIT."""
        lines = run_shell("PUT a 1\n")
        assert lines[-1] == "Goodbye from docsim!"

    def test_handle_command_signals_exit(self) -> None:
        shell = CommandShell(KeyValueStore(), stdin=io.StringIO(), stdout=io.StringIO())

        assert shell.handle_command("PUT a 1") is False
        assert shell.handle_command("quit") is True
