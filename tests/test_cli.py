# SPDX-License-Identifier: MIT

import pendulum
import pytest
from typer.testing import CliRunner

from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import STORE_REPO, load_store
from reti.terminal.app import app

runner = CliRunner()


@pytest.fixture
def store_path(isolated_app):
    return isolated_app / "work.json"


@pytest.fixture
def invoke(store_path):
    """Run a command against `store_path` and flush like the app does on exit."""

    def _invoke(*args: str, input=None):
        result = runner.invoke(app, ["--file", str(store_path), *args], input=input)
        STORE_REPO.flush()
        return result

    return _invoke


@pytest.fixture
def initialized(invoke, store_path):
    result = invoke("init", "--fee", "100")
    assert result.exit_code == 0
    return store_path


def test_init(invoke, store_path) -> None:
    result = invoke("init", "--fee", "50")

    assert result.exit_code == 0
    assert "Initialized" in result.stdout
    assert load_store(store_path) == {"fee_per_hour": 50.0, "years": []}


def test_init_asks_before_overwriting(invoke, initialized) -> None:
    result = invoke("init", input="n\n")
    assert result.exit_code == 1
    assert load_store(initialized)["fee_per_hour"] == 100.0

    result = invoke("init", "--force")
    assert result.exit_code == 0
    assert load_store(initialized)["fee_per_hour"] == 0.0


def test_init_with_legacy_file(invoke, store_path, tmp_path) -> None:
    legacy = tmp_path / "legacy.txt"
    legacy.write_text("2024-05-23 08:00-12:00\n# note\n2024-05-24 08:00-10:00\n")

    result = invoke("init", str(store_path), str(legacy))

    assert result.exit_code == 0
    assert "2 day(s) changed" in result.stdout
    assert len(load_store(store_path)["years"][0]["days"]) == 2


def test_missing_store_is_reported(invoke) -> None:
    result = invoke("get", "fee")
    assert result.exit_code == 1
    assert "Error" in result.stdout


def test_fee(invoke, initialized) -> None:
    assert invoke("set", "fee", "42.5").exit_code == 0
    result = invoke("get", "f")

    assert result.exit_code == 0
    assert "Current fee: 42.5" in result.stdout
    assert invoke("set", "fee", "-1").exit_code != 0


def test_add_part(invoke, initialized) -> None:
    result = invoke("add", "part", "08:00", "12:00", "--date", "2024-05-23")
    assert result.exit_code == 0

    result = invoke("a", "p", "1100", "1300", "-d", "2024-05-23")
    assert result.exit_code == 1

    result = invoke("a", "p", "13:00", "-d", "2024-05-23")
    assert result.exit_code == 1

    result = invoke("a", "p", "13:00", "-d", "2024-05-24", "-x", "1.5")
    assert result.exit_code == 0

    days = load_store(initialized)["years"][0]["days"]
    assert days[0]["parts"] == [
        {"start": pendulum.time(8, 0), "stop": pendulum.time(12, 0), "factor": None},
    ]
    assert days[1]["parts"] == [
        {"start": pendulum.time(13, 0), "stop": None, "factor": 1.5},
    ]


def test_add_part_rejects_bad_time(invoke, initialized) -> None:
    result = invoke("add", "part", "25:00", "26:00")
    assert result.exit_code != 0


def test_add_parts(invoke, initialized) -> None:
    result = invoke(
        "add", "parts", "08:00-12:00", "11:00-13:00", "13:00-17:00-2", "-d", "2024-05-23"
    )

    assert result.exit_code == 0
    assert "Added 2 of 3 part(s)" in result.stdout
    assert len(load_store(initialized)["years"][0]["days"][0]["parts"]) == 2


def test_add_parse(invoke, initialized) -> None:
    result = invoke("add", "parse", "2024-05-23", "08:00-12:00", "#", "planning")
    assert result.exit_code == 0

    day = load_store(initialized)["years"][0]["days"][0]
    assert day["comment"] == "planning"

    assert invoke("add", "parse", "garbage").exit_code == 1
    assert invoke("add", "parse", "2024-05-23", "09:00-10:00").exit_code == 1


def test_import(invoke, initialized, tmp_path) -> None:
    legacy = tmp_path / "legacy.txt"
    legacy.write_text(
        "2024-05-23 08:00-12:00\n2024-05-23 09:00-10:00\n\ngarbage\n2024-05-24 08:00-10:00\n"
    )

    result = invoke("import", str(legacy))

    assert result.exit_code == 0
    assert "2 day(s) changed, 1 unchanged, 1 line(s) skipped, 1 failed" in result.stdout

    assert invoke("i", str(tmp_path / "missing.txt")).exit_code == 1


def test_remove(invoke, initialized) -> None:
    invoke("add", "parse", "2024-05-23", "08:00-12:00")
    invoke("add", "parse", "2024-05-24", "08:00-12:00")

    result = invoke("rm", "2024-05-23", input="n\n")
    assert result.exit_code == 0
    assert len(load_store(initialized)["years"][0]["days"]) == 2

    result = invoke("rm", "-f", "2024-05-23", "2024-05-25")
    assert result.exit_code == 0
    assert "Removed 2024-05-23" in result.stdout
    assert "2024-05-25 is not recorded" in result.stdout
    assert len(load_store(initialized)["years"][0]["days"]) == 1


def test_edit(invoke, initialized, monkeypatch) -> None:
    invoke("add", "parse", "2024-05-23", "08:00-12:00", "#", "old")
    seen = {}

    def fake_editor(initial_text, editor):
        seen["text"] = initial_text
        return "2024-05-23 09:00-10:00-2 # new\n"

    monkeypatch.setattr("reti.terminal.store.open_editor_for_text", fake_editor)
    result = invoke("edit", "2024-05-23")

    assert result.exit_code == 0
    assert seen["text"] == "2024-05-23   08:00-12:00-1.0   # old\n"
    day = load_store(initialized)["years"][0]["days"][0]
    assert day["parts"] == [
        {"start": pendulum.time(9, 0), "stop": pendulum.time(10, 0), "factor": 2.0}
    ]
    assert day["comment"] == "new"


def test_edit_without_changes(invoke, initialized, monkeypatch) -> None:
    monkeypatch.setattr(
        "reti.terminal.store.open_editor_for_text", lambda initial_text, editor: None
    )
    result = invoke("e", "2024-05-23")

    assert result.exit_code == 0
    assert "Nothing to do" in result.stdout


@pytest.fixture
def recorded(invoke, initialized):
    invoke("add", "parse", "2024-05-20", "08:00-12:00-2", "#", "kickoff")
    invoke("add", "parse", "2024-05-27", "08:00-10:00")
    invoke("add", "parse", "2024-06-03", "08:00-12:00")
    return initialized


def test_show_month(invoke, recorded) -> None:
    result = invoke("show", "-d", "-v", "month", "5", "-y", "2024")

    assert result.exit_code == 0
    assert "Assumed fee per hour: 100.00" in result.stdout
    assert "Month: 05 - May (2024)" in result.stdout
    assert "kickoff" in result.stdout
    assert "6.00h" in result.stdout
    assert "1000.00" in result.stdout


def test_show_week(invoke, recorded) -> None:
    result = invoke("s", "w", "21", "22", "24", "-y", "2024")

    assert result.exit_code == 0
    assert "Week: 21 (2024)" in result.stdout
    assert "Week: 22 (2024)" in result.stdout
    assert "Week 24 not available for year 2024!" in result.stdout


def test_show_year(invoke, recorded) -> None:
    result = invoke("show", "year", "2024", "2019")

    assert result.exit_code == 0
    assert "Year: 2024, 2 month(s) recorded" in result.stdout
    assert "Accumulated worked: 10.00h - earned: 1400.00" in result.stdout
    assert "Year 2019 not available!" in result.stdout


def test_show_day(invoke, recorded) -> None:
    result = invoke("show", "-p", "day", "20", "21", "-y", "2024", "-m", "5")

    assert result.exit_code == 0
    assert "08:00-12:00 f: 2.0" in result.stdout
    assert "Day 21 not available" in result.stdout


def test_config(isolated_app) -> None:
    result = runner.invoke(app, ["config", "set", "--parse-mode", "strict", "--editor", "nano"])
    assert result.exit_code == 0
    assert CONFIGURATION_REPO.get_config()["parse_mode"] == "strict"
    assert CONFIGURATION_REPO.get_config()["editor"] == "nano"

    result = runner.invoke(app, ["c", "v"])
    assert result.exit_code == 0
    assert "strict" in result.stdout

    result = runner.invoke(app, ["config", "set", "--log-level", "loud"])
    assert result.exit_code != 0


def test_strict_mode_is_used_by_commands(invoke, initialized) -> None:
    CONFIGURATION_REPO.update_config(parse_mode="strict")
    result = invoke("add", "parse", "2024-05-23", "08:00-12:00", "lunch")
    assert result.exit_code == 1
    assert "Unable to parse data" in result.stdout


def test_edit_marks_open_parts(invoke, initialized, monkeypatch) -> None:
    invoke("add", "part", "08:00", "-d", "2024-05-23")
    seen = {}

    def fake_editor(initial_text, editor):
        seen["text"] = initial_text
        return None

    monkeypatch.setattr("reti.terminal.store.open_editor_for_text", fake_editor)
    result = invoke("edit", "2024-05-23")

    assert result.exit_code == 0
    assert seen["text"] == (
        "# 2024-05-23 has an open part, add a stop time or it is dropped\n"
        "2024-05-23   08:00-\n"
    )
