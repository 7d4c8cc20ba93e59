from __future__ import annotations

import json
from pathlib import Path

from desktop_settings.cli import EXIT_IO, EXIT_OK, EXIT_USAGE, main, parse_assignments
from desktop_settings.paths import ensure_settings_file
from desktop_settings.theme import THEME_ENV_VAR, detect_theme


def test_parse_assignments_builds_nested_patch() -> None:
    patch = parse_assignments(["theme=dark", "stdoutMaxSize=500", "languages.python.path=/usr/bin/python3"])
    assert patch == {
        "theme": "dark",
        "stdoutMaxSize": 500,
        "languages": {"python": {"path": "/usr/bin/python3"}},
    }


def test_cli_set_and_show(tmp_path: Path, capsys, monkeypatch) -> None:
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
    p = tmp_path / ".settings"

    assert main(["--file", str(p), "set", "stdoutMaxSize=500", "languages.ruby.path=ruby"]) == EXIT_OK
    capsys.readouterr()

    assert main(["--file", str(p), "show"]) == EXIT_OK
    shown = json.loads(capsys.readouterr().out)
    assert shown["stdoutMaxSize"] == 500
    assert shown["languages"] == {"ruby": {"path": "ruby"}}
    assert shown["theme"] == "light"

    assert main(["--file", str(p), "get", "stdoutMaxSize"]) == EXIT_OK
    assert capsys.readouterr().out.strip() == "500"


def test_cli_rejects_invalid_update(tmp_path: Path, capsys) -> None:
    p = tmp_path / ".settings"
    assert main(["--file", str(p), "set", "theme=blue"]) == EXIT_USAGE
    assert "theme" in capsys.readouterr().err
    assert not p.exists()


def test_cli_io_error(tmp_path: Path, capsys) -> None:
    p = tmp_path / ".settings"
    p.mkdir()
    assert main(["--file", str(p), "show"]) == EXIT_IO


def test_ensure_settings_file_resolves_relative_names(tmp_path: Path) -> None:
    p = ensure_settings_file("conf/.settings", base_dir=tmp_path)
    assert p == (tmp_path / "conf" / ".settings").resolve()
    assert p.parent.is_dir()
    assert not p.exists()

    default = ensure_settings_file(base_dir=tmp_path)
    assert default.name == ".settings"


def test_detect_theme_env_override(monkeypatch) -> None:
    monkeypatch.setenv(THEME_ENV_VAR, "DARK")
    assert detect_theme() == "dark"
    monkeypatch.setenv(THEME_ENV_VAR, "sepia")
    assert detect_theme() == "light"


def test_setup_logging_writes_log_file(tmp_path: Path, monkeypatch) -> None:
    import logging

    from desktop_settings.log_utils import setup_logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    log_file = tmp_path / "logs" / "settings.log"
    assert setup_logging(logging.INFO, log_file=log_file) == str(log_file)
    try:
        logging.getLogger("desktop_settings.test").info("hello from test")
        for h in root.handlers:
            h.flush()
        assert "[INFO] hello from test" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            h.close()


def test_setup_logging_keeps_existing_configuration(monkeypatch) -> None:
    import logging

    from desktop_settings.log_utils import setup_logging

    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])

    assert setup_logging() is None
    assert root.handlers == [existing]


def test_cli_show_output_stays_json_after_recovery(tmp_path: Path, capsys, monkeypatch) -> None:
    import logging

    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)

    p = tmp_path / ".settings"
    p.write_bytes(b"{corrupt")
    try:
        assert main(["--file", str(p), "show"]) == EXIT_OK
    finally:
        for h in list(root.handlers):
            h.close()

    captured = capsys.readouterr()
    shown = json.loads(captured.out)
    assert shown["theme"] == "light"
    assert "corrupted" in captured.err
    assert (tmp_path / ".settings.bak").read_bytes() == b"{corrupt"
