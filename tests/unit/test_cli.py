from __future__ import annotations

import json
from pathlib import Path

import pytest

from study_order import cli
from study_order.cli import main
from study_order.utils.config import SOConfig


def _write_json(path: Path, data) -> None:
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    root = tmp_path / "data"
    root.mkdir()
    _write_json(
        root / "cccedict.json",
        {
            "A": {"d": "a"},
            "B": {"d": "b"},
            "xy": {"t": "xy", "p": "x y", "d": "x and y"},
        },
    )
    _write_json(root / "blcu.json", {"x": 100, "y": 50})
    _write_json(root / "char_strokes.json", {"x": 1, "y": 1})
    _write_json(root / "outlier_decomp.json", {"A": ["x"], "B": ["x", "y"]})
    _write_json(root / "heisig_decomp.json", {})
    return root


def test_main_prints_one_identifier_per_line(tmp_path: Path, data_dir: Path, capsys) -> None:
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("// stage 1\nxy\tthe target\n", encoding="utf-8")

    code = main(["--data-dir", str(data_dir), "--vocab", str(vocab), "--expansion", "1"])

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["x", "A", "y", "B", "xy"]


def test_known_words_are_skipped(tmp_path: Path, data_dir: Path, capsys) -> None:
    known = tmp_path / "known.txt"
    known.write_text("x\ny\n", encoding="utf-8")
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("xy\n", encoding="utf-8")

    code = main(
        ["--data-dir", str(data_dir), "--known", str(known), "--vocab", str(vocab), "--check"]
    )

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["xy"]


def test_multiple_vocab_files_are_stages(tmp_path: Path, data_dir: Path, capsys) -> None:
    first = tmp_path / "one.txt"
    second = tmp_path / "two.txt"
    first.write_text("A\n", encoding="utf-8")
    second.write_text("A\nB\n", encoding="utf-8")

    code = main(
        [
            "--data-dir", str(data_dir),
            "--vocab", str(first),
            "--vocab", str(second),
            "--expansion", "0",
            "--report",
        ]
    )

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == ["x", "A", "y", "B"]
    assert "cards: 4" in captured.err


def test_missing_table_fails_without_output(
    tmp_path: Path, data_dir: Path, capsys, caplog
) -> None:
    (data_dir / "blcu.json").unlink()
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("xy\n", encoding="utf-8")

    code = main(["--data-dir", str(data_dir), "--vocab", str(vocab)])

    assert code == 1
    assert capsys.readouterr().out == ""
    assert "Missing data file" in caplog.text


def test_negative_expansion_is_an_argument_error(data_dir: Path) -> None:
    with pytest.raises(SystemExit) as info:
        main(["--data-dir", str(data_dir), "--expansion", "-2"])
    assert info.value.code == 2


def test_run_uses_module_config_by_default(tmp_path: Path, data_dir: Path, monkeypatch) -> None:
    vocab = tmp_path / "vocab.txt"
    vocab.write_text("xy\n", encoding="utf-8")
    monkeypatch.setattr(cli, "config", SOConfig(expansion=0, check=True))

    plan, graph = cli.run(None, [vocab], data_dir=data_dir)

    assert plan.sequence() == ["x", "y", "xy"]
    assert "xy" in graph


def test_check_flag_sets_config_check() -> None:
    args = cli.build_parser().parse_args(["--check"])
    assert cli.config_from_args(args).check
    assert not cli.config_from_args(cli.build_parser().parse_args([])).check
