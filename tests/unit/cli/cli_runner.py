"""Unit tests for the command-line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from classname_prefix.cli import main
from tests.helpers.estree import div, render, program, identifier, export_default, class_declaration


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def _write(path: Path, tree: dict) -> Path:
    path.write_text(json.dumps(tree), encoding="utf-8")
    return path


def test_clean_unit_exits_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path / "a.json", program(export_default(identifier("Foo")), render(div("foo foo__a"))))
    assert main([str(path)]) == 0
    assert capsys.readouterr().err == ""


def test_violations_exit_one_with_locations(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    el = div("bar")
    path = _write(tmp_path / "a.json", program(export_default(identifier("Foo")), render(el)))
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    line = el["loc"]["start"]["line"]
    assert "Class name prefix violations:" in err
    assert f'  {path}:{line}:1: Class "bar" name should starts with "foo__"' in err


def test_prefix_type_flag(tmp_path: Path) -> None:
    path = _write(tmp_path / "a.json", program(class_declaration("MyCard"), render(div("my_card__a"))))
    assert main([str(path)]) == 1
    assert main([str(path), "--prefix-type", "underscore"]) == 0


def test_policy_file_in_cwd(tmp_path: Path) -> None:
    (tmp_path / "classname-prefix.toml").write_text('[rule]\nprefixType = "underscore"\n', encoding="utf-8")
    path = _write(tmp_path / "a.json", program(class_declaration("MyCard"), render(div("my_card__a"))))
    assert main([str(path)]) == 0


def test_flag_overrides_policy(tmp_path: Path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('[rule]\nprefixType = "underscore"\n', encoding="utf-8")
    path = _write(tmp_path / "a.json", program(class_declaration("MyCard"), render(div("my-card__a"))))
    assert main([str(path), "--config", str(config)]) == 1
    assert main([str(path), "--config", str(config), "--prefix-type", "dash"]) == 0


def test_unknown_policy_option_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('[rule]\nseparator = "--"\n', encoding="utf-8")
    path = _write(tmp_path / "a.json", program())
    assert main([str(path), "--config", str(config)]) == 2
    assert "unknown rule option(s): separator" in capsys.readouterr().err


def test_bad_input_exits_three(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "a.json"
    path.write_text("not json", encoding="utf-8")
    assert main([str(path)]) == 3
    assert "invalid JSON" in capsys.readouterr().err


def test_directory_argument(tmp_path: Path) -> None:
    units = tmp_path / "ast"
    units.mkdir()
    _write(units / "a.json", program(export_default(identifier("Foo")), render(div("foo__a"))))
    _write(units / "b.json", program(render(div("x"))))
    assert main([str(units)]) == 1


def test_unknown_log_level_is_a_usage_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = _write(tmp_path / "a.json", program())
    with pytest.raises(SystemExit) as exc_info:
        main([str(path), "--log-level", "verbose"])
    assert exc_info.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_is_case_insensitive(tmp_path: Path) -> None:
    path = _write(tmp_path / "a.json", program())
    assert main([str(path), "--log-level", "warning"]) == 0


def test_bad_unit_still_prints_other_violations(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "a.json").write_text("not json", encoding="utf-8")
    _write(tmp_path / "b.json", program(export_default(identifier("Foo")), render(div("bar"))))
    assert main([str(tmp_path)]) == 3
    err = capsys.readouterr().err
    assert 'Class "bar" name should starts with "foo__"' in err
    assert "invalid JSON" in err
