import json
import sys
from pathlib import Path

import pytest

from polish import polish_cli
from polish.polish_errors import EvalOverflowError, UnexpectedEof


def test_run_polish_string_input_prints(capsys: pytest.CaptureFixture[str]) -> None:
    result = polish_cli.run_polish(source="+ 1 + 2 3", is_string=True)
    assert result == 6
    assert capsys.readouterr().out.strip() == "6"


def test_run_polish_file_input(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    file_path = tmp_path / "sum.pn"
    file_path.write_text("+ 40\n  2\n")
    assert polish_cli.run_polish(source=str(file_path)) == 42
    assert capsys.readouterr().out.strip() == "42"


def test_run_polish_rejects_other_extensions() -> None:
    with pytest.raises(ValueError, match="Only .pn files are supported."):
        polish_cli.run_polish(source="sum.txt")


def test_run_polish_show_tokens(capsys: pytest.CaptureFixture[str]) -> None:
    polish_cli.run_polish(source="(+ 1 2)", is_string=True, show_tokens=True)
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines == ["( + 1 2 )", "3"]


def test_run_polish_show_ast(capsys: pytest.CaptureFixture[str]) -> None:
    polish_cli.run_polish(source="(5)", is_string=True, show_ast=True)
    out = capsys.readouterr().out
    tree, _, value = out.rpartition("}")
    assert json.loads(tree + "}") == {
        "kind": "parened",
        "inner": {"kind": "num", "value": 5},
    }
    assert value.strip() == "5"


def test_run_polish_overflow_policy(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(EvalOverflowError):
        polish_cli.run_polish(source="+ 2147483647 1", is_string=True)
    assert (
        polish_cli.run_polish(source="+ 2147483647 1", is_string=True, overflow="wrap")
        == -2147483648
    )


def test_run_polish_propagates_parse_errors() -> None:
    with pytest.raises(UnexpectedEof):
        polish_cli.run_polish(source="+ 1", is_string=True)


def test_main_entry(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["polish", "-s", "+ 1 2"])
    polish_cli.main()
    assert capsys.readouterr().out.strip() == "3"


def test_main_saturate_flag(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(
        sys, "argv", ["polish", "-s", "+ 2147483647 9", "--overflow", "saturate"]
    )
    polish_cli.main()
    assert capsys.readouterr().out.strip() == "2147483647"


def test_main_reports_errors(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["polish", "-s", ") 1"])
    with pytest.raises(SystemExit) as excinfo:
        polish_cli.main()
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("[error] >>> Unexpected token ')'")


def test_main_missing_file(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["polish", str(tmp_path / "nope.pn")])
    with pytest.raises(SystemExit):
        polish_cli.main()
    assert "[error] >>>" in capsys.readouterr().err


def test_main_no_args_starts_repl(monkeypatch: pytest.MonkeyPatch) -> None:
    called: dict[str, bool] = {}
    monkeypatch.setattr(sys, "argv", ["polish"])
    monkeypatch.setattr(
        "polish.polish_repl.start_repl", lambda: called.setdefault("repl", True)
    )
    polish_cli.main()
    assert called == {"repl": True}


def test_main_repl_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_repl(overflow: str = "error", verbose: bool = False) -> None:
        seen.update(overflow=overflow, verbose=verbose)

    monkeypatch.setattr(sys, "argv", ["polish", "--repl", "--verbose", "--overflow", "wrap"])
    monkeypatch.setattr("polish.polish_repl.start_repl", fake_repl)
    polish_cli.main()
    assert seen == {"overflow": "wrap", "verbose": True}
