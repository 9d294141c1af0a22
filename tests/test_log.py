from __future__ import annotations

import logging

from jobdash import log as jobdash_log


def test_unwritable_log_dir_falls_back_to_console(tmp_path, monkeypatch, capsys):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x")
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(jobdash_log, "_LOG_DIR", blocker / "logs")

    jobdash_log._configure()

    assert [type(h) for h in root.handlers] == [logging.StreamHandler]
    assert "File logging disabled" in capsys.readouterr().out
