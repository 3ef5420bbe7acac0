from __future__ import annotations

import logging

import pytest

from skirmish import main as skirmish_main
from skirmish.main import main, setup_logging


def test_default_run_prints_scenario_with_headings(capsys):
    assert main([]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out[0] == "=== Processing Character ==="
    assert "  Hero cannot fly." in out
    assert "Ghost flies rapidly through the air." in out
    assert out[-4:] == [
        "=== Combat ===",
        "Hero swings a sword at Goblin.",
        "Goblin stabs Hero with a rusty dagger.",
        "Ghost attacks Hero with a chilling touch.",
    ]


def test_flags_select_silent_fallback_and_shoot(capsys):
    assert main(["--roster", "archer,ghost", "--with-shoot", "--silent", "--no-headings"]) == 0

    assert capsys.readouterr().out.splitlines() == [
        "Archer steps lightly into position.",
        "Archer looses an arrow downrange.",
        "Ghost floats silently.",
        "Ghost flies rapidly through the air.",
        "Archer jabs Ghost with the end of a bow.",
        "Ghost attacks Archer with a chilling touch.",
    ]


def test_environment_configures_run(monkeypatch, capsys):
    monkeypatch.setenv("SKIRMISH_FALLBACK", "silent")
    monkeypatch.setenv("SKIRMISH_HEADINGS", "off")

    assert main(["--roster", "goblin"]) == 0
    assert capsys.readouterr().out.splitlines() == ["Goblin scurries along the ground."]


def test_transcript_mirrors_console(tmp_path, capsys):
    path = tmp_path / "run.txt"

    assert main(["--no-headings", "--transcript", str(path)]) == 0

    printed = capsys.readouterr().out.splitlines()
    assert path.read_text(encoding="utf-8").splitlines() == printed
    assert len(printed) == 9


@pytest.mark.parametrize("roster", ["dragon", "ghost,,wyrm", " , "])
def test_bad_roster_is_a_usage_error(roster, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--roster", roster])

    assert excinfo.value.code == 2
    assert "--roster" in capsys.readouterr().err


def test_help_shows_default_roster_as_typed(capsys):
    with pytest.raises(SystemExit):
        main(["--help"])

    assert "character,goblin,ghost" in capsys.readouterr().out


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
    logging.disable(logging.NOTSET)


def test_setup_logging_writes_log_file(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setenv("SKIRMISH_LOGGING", "1")
    monkeypatch.setenv("SKIRMISH_DEBUG", "1")
    monkeypatch.setenv("SKIRMISH_LOG_DIR", str(tmp_path / "logs"))

    setup_logging()
    logging.getLogger("skirmish.test").debug("entities ready")
    for handler in restore_root_logger.handlers:
        handler.flush()

    log_file = tmp_path / "logs" / "skirmish.log"
    assert log_file.exists()
    assert "DEBUG skirmish.test: entities ready" in log_file.read_text(encoding="utf-8")
    assert restore_root_logger.level == logging.DEBUG


def test_console_script_sets_up_logging_before_running(monkeypatch):
    calls = []
    monkeypatch.setattr(skirmish_main, "setup_logging", lambda: calls.append("logging"))
    monkeypatch.setattr(skirmish_main, "main", lambda: calls.append("main") or 0)

    with pytest.raises(SystemExit) as excinfo:
        skirmish_main.run()

    assert excinfo.value.code == 0
    assert calls == ["logging", "main"]
