"""Integration tests for the docsim command line."""

from __future__ import annotations

import io

import pytest

from docsim.adapters.inbound.cli import build_parser, main


@pytest.mark.integration
class TestCompareCommand:
    """End-to-end comparison runs."""

    def test_compare_prints_report(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = main(["compare", "--sizes", "10", "20", "--queries", "20", "--seed", "42"])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert out.startswith("Document-Centric vs Traditional Storage Simulation\n")
        assert "Testing with 10 documents, 20 queries:" in out
        assert "Testing with 20 documents, 20 queries:" in out
        assert out.index("Testing with 10") < out.index("Testing with 20")
        assert "  Query Hit Rate: 0.60" in out
        assert "  Query Hit Rate: 0.50" in out
        assert "  Memory Usage: 5048 bytes (~4 KB)" in out
        assert "ANALYSIS SUMMARY" in out

    def test_report_is_reproducible(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Everything except wall times repeats across runs."""

        def stable_lines() -> list[str]:
            main(["compare", "--sizes", "50", "--queries", "100"])
            out = capsys.readouterr().out
            return [
                line
                for line in out.splitlines()
                if "Time" not in line and "FASTER" not in line and "slower" not in line
            ]

        assert stable_lines() == stable_lines()

    def test_show_metrics_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["compare", "--sizes", "10", "--queries", "5", "--show-metrics"]) == 0
        captured = capsys.readouterr()

        assert "docsim_records_inserted_total" in captured.err
        assert "docsim_records_inserted_total" not in captured.out

    @pytest.mark.parametrize("args", [["--queries", "0"], ["--sizes", "0"], ["--seed", "-1"]])
    def test_invalid_arguments_exit_nonzero(
        self, args: list[str], capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["compare", *args]) == 1
        assert "docsim:" in capsys.readouterr().err

    def test_environment_defaults(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("DOCSIM_BENCHMARK__SIZES", "[10]")
        monkeypatch.setenv("DOCSIM_BENCHMARK__QUERIES", "20")

        assert main(["compare"]) == 0
        out = capsys.readouterr().out
        assert "Testing with 10 documents, 20 queries:" in out
        assert "Testing with 1000" not in out

    def test_invalid_environment_exits_nonzero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("DOCSIM_BENCHMARK__QUERIES", "-3")

        assert main(["compare"]) == 1
        assert "invalid configuration" in capsys.readouterr().err


@pytest.mark.integration
class TestShellCommand:
    """The interactive shell behind the CLI."""

    def test_shell_session(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("PUT name Alice\nGET name\nLIST\nEXIT\n"))

        assert main(["shell"]) == 0
        out = capsys.readouterr().out

        assert "Stored: name = Alice" in out
        assert "name: Alice" in out
        assert "  name" in out
        assert out.rstrip().endswith("Goodbye from docsim!")


@pytest.mark.integration
def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
