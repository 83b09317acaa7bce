from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

import app


def _write_batch(tmp_path: Path) -> Path:
    batch = tmp_path / "2014" / "a.dat"
    batch.parent.mkdir()
    batch.write_text(
        json.dumps(
            [
                {"text": "good morning #sun", "user": {"lang": "en"}},
                {"text": "guten Morgen", "user": {"lang": "de"}},
            ]
        ),
        encoding="utf-8",
    )
    return batch


def test_main_processes_root_and_writes_log(tmp_path: Path) -> None:
    batch = _write_batch(tmp_path)

    # The console script passes this value to sys.exit, so it must be None.
    assert app.main(["--root", str(tmp_path), "--quiet", "--config", str(tmp_path / "none.json")]) is None

    assert json.loads(Path(f"{batch}_en").read_text(encoding="utf-8")) == ["good morning #sun"]
    assert json.loads(Path(f"{batch}_en_filtered").read_text(encoding="utf-8")) == ["good morning"]
    log = (tmp_path / "filter_english_tweets.log").read_text(encoding="utf-8")
    assert log.startswith("Processing 1 directories")
    assert "Totals:\n2 Tweets\n1 English according to User" in log


def test_run_returns_summary(tmp_path: Path) -> None:
    _write_batch(tmp_path)

    summary = app.run(str(tmp_path), app.settings_module.Settings(), echo=False)

    assert summary.statistics.total == 2
    assert summary.statistics.passed == 1
    assert summary.directories == 1


def test_missing_root_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        app.run(str(tmp_path / "nope"), app.settings_module.Settings())


def test_relative_log_file_resolves_outside_scanned_root(tmp_path: Path) -> None:
    resolved = app._resolve_log_path("logs/tweetsieve.log")

    assert resolved == os.path.join(app.settings_module.PROJECT_ROOT, "logs/tweetsieve.log")
    assert not resolved.startswith(str(tmp_path))
    absolute = str(tmp_path / "run.log")
    assert app._resolve_log_path(absolute) == absolute
