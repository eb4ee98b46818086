# tests/test_cli.py

import json

import pytest

from wallcal.cli import main
from wallcal.config import CONFIG_ENV, load_config


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "config.json"))


def test_moons(capsys):
    assert main(["moons", "2024"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[0] == " 1  2024-01-25  Wolf Moon"
    assert lines[9].endswith("Super Falling Leaf Moon")


def test_seasons(capsys):
    assert main(["seasons", "2024"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "2024-03-19  Spring Equinox",
        "2024-06-20  Summer Solstice",
        "2024-09-22  Fall Equinox",
        "2024-12-21  Winter Solstice",
    ]


def test_sun(capsys):
    assert main(["sun", "2024-06-21"]) == 0
    out = capsys.readouterr().out
    assert "Sunset : 9:11 PM" in out


def test_sun_bad_date():
    with pytest.raises(SystemExit):
        main(["sun", "June 21"])


def test_events(capsys):
    assert main(["events", "2026", "--defaults", "--no-sun", "--no-moons"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "2026-07-03: Independence Day (Observed)" in lines
    assert "2026-07-04: Independence Day" in lines
    assert lines == sorted(lines)


def test_events_birthdays_file(tmp_path, capsys):
    bfile = tmp_path / "birthdays.txt"
    bfile.write_text("Jun 12 1984 Joe\n", encoding="utf-8")
    argv = ["events", "2026", "--birthdays", str(bfile),
            "--no-federal", "--no-observances", "--no-sun", "--no-moons", "--no-seasons"]
    assert main(argv) == 0
    assert capsys.readouterr().out.splitlines() == ["2026-06-12: Joe's 42nd Birthday"]


def test_events_save_config(tmp_path, capsys):
    path = tmp_path / "saved.json"
    assert main(["events", "2026", "--config", str(path), "--no-sun", "--no-federal", "--save-config"]) == 0
    cfg = load_config(path)
    assert cfg.sunrise_sunset is False
    assert cfg.federal_holidays is False
    assert cfg.observances is True
    assert "Saved settings" in capsys.readouterr().err


def test_events_uses_stored_config(capsys):
    main(["events", "2026", "--no-federal", "--no-observances", "--no-sun",
          "--no-moons", "--no-seasons", "--save-config"])
    capsys.readouterr()
    assert main(["events", "2026"]) == 0
    assert capsys.readouterr().out == ""


def test_bad_config_is_reported(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"calendarConfig": {"fullMoons": "no"}}), encoding="utf-8")
    assert main(["events", "2026", "--config", str(path)]) == 1
    assert capsys.readouterr().err.startswith("Error: ")


def test_grid(capsys):
    assert main(["grid", "2024", "10", "--width", "10"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("October 2024\n")
    assert "[pumpkin] row 5, column 5" in out


def test_diag_moon_table(capsys):
    assert main(["diag", "moon-table", "--from-year", "2024", "--to-year", "2024", "--only-special"]) == 0
    out = capsys.readouterr().out
    assert "2024: 12 full moons" in out
    assert "S-  Super Cold Moon" in out
    assert "Wolf Moon" not in out


def test_verbose_logging(capsys, caplog):
    import logging

    with caplog.at_level(logging.DEBUG, logger="wallcal"):
        assert main(["-v", "events", "2024", "--defaults", "--no-sun"]) == 0
    assert "skipping sunrise/sunset" in caplog.text
