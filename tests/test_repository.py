# SPDX-License-Identifier: MIT

import json

import pendulum
import pytest
from yaml import dump

from reti import configuration
from reti.errors import SnapshotDecodeError, StorageError
from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import (
    StoreRepository,
    convert_store_for_deserialization,
    convert_store_for_serialization,
    load_store,
    save_store,
)
from reti.service.store import add_day
from reti.template.part import get_part_template


@pytest.fixture
def filled_store(store, make_day):
    add_day(store, make_day("2024-05-23 08:00-12:00-2 13:00-17:00 # release"))
    add_day(store, make_day("2023-12-31 10:00-11:00"))
    add_day(store, make_day("2024-05-24 08:00-12:00"))
    store["years"][0]["days"][1]["parts"].append(
        get_part_template(pendulum.time(13, 0))
    )
    return store


def test_snapshot_shape(filled_store) -> None:
    raw = convert_store_for_serialization(filled_store)

    assert raw["fee_per_hour"] == 100.0
    assert [year["year"] for year in raw["years"]] == [2024, 2023]
    day = raw["years"][0]["days"][0]
    assert day == {
        "date": "2024-05-23",
        "parts": [
            {"start": "08:00", "stop": "12:00", "factor": 2.0},
            {"start": "13:00", "stop": "17:00", "factor": None},
        ],
        "comment": "release",
    }
    assert raw["years"][0]["days"][1]["parts"][1] == {
        "start": "13:00",
        "stop": None,
        "factor": None,
    }


def test_save_and_load(filled_store, tmp_path) -> None:
    path = tmp_path / "times.json"
    save_store(filled_store, path)

    assert load_store(path) == filled_store
    assert "\n" not in path.read_text()


def test_save_pretty(filled_store, tmp_path) -> None:
    path = tmp_path / "times.json"
    save_store(filled_store, path, pretty=True)

    assert path.read_text().startswith('{\n  "fee_per_hour"')
    assert load_store(path) == filled_store


def test_load_missing_file(tmp_path) -> None:
    with pytest.raises(StorageError):
        load_store(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path) -> None:
    path = tmp_path / "times.json"
    path.write_text("{not json")
    with pytest.raises(SnapshotDecodeError):
        load_store(path)


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"fee_per_hour": 1.0},
        {"fee_per_hour": "much", "years": []},
        {"fee_per_hour": 1.0, "years": [{"year": 2024}]},
        {
            "fee_per_hour": 1.0,
            "years": [{"year": 2024, "days": [{"date": "2024-13-01", "parts": []}]}],
        },
        {
            "fee_per_hour": 1.0,
            "years": [
                {
                    "year": 2024,
                    "days": [{"date": "2024-05-23", "parts": [{"start": "late"}]}],
                }
            ],
        },
        [],
    ],
)
def test_decode_malformed_snapshot(raw) -> None:
    with pytest.raises(SnapshotDecodeError):
        convert_store_for_deserialization(raw)


def test_decode_snapshot_without_optional_fields() -> None:
    raw = {
        "fee_per_hour": 5,
        "years": [
            {
                "year": 2024,
                "days": [{"date": "2024-05-23", "parts": [{"start": "08:00"}]}],
            }
        ],
    }
    store = convert_store_for_deserialization(raw)
    day = store["years"][0]["days"][0]

    assert store["fee_per_hour"] == 5.0
    assert day["comment"] is None
    assert day["parts"] == [
        {"start": pendulum.time(8, 0), "stop": None, "factor": None}
    ]


def test_repository_tracks_changes(tmp_path, make_day) -> None:
    path = tmp_path / "times.json"
    repo = StoreRepository(path)
    assert not repo.exists()

    repo.initialize(25.0)
    assert repo.flush()
    assert repo.exists()
    assert not repo.flush()

    assert not repo.add_day(make_day("2024-05-23 nothing"))
    assert not repo.is_dirty
    assert repo.add_day(make_day("2024-05-23 08:00-12:00"))
    assert repo.is_dirty
    assert repo.flush()

    reloaded = StoreRepository(path)
    assert reloaded.get_fee() == 25.0
    assert reloaded.get_day(2024, 5, 23)["parts"][0]["stop"] == pendulum.time(12, 0)
    assert json.loads(path.read_text())["fee_per_hour"] == 25.0


def test_repository_set_path_discards_loaded_store(tmp_path) -> None:
    first = tmp_path / "first.json"
    second = tmp_path / "second.json"
    save_store({"fee_per_hour": 1.0, "years": []}, first)
    save_store({"fee_per_hour": 2.0, "years": []}, second)

    repo = StoreRepository(first)
    repo.set_fee(10.0)
    repo.set_path(second)

    assert not repo.is_dirty
    assert repo.get_fee() == 2.0


def test_repository_import_lines(tmp_path, today) -> None:
    repo = StoreRepository(tmp_path / "times.json")
    repo.initialize()
    repo.flush()

    result = repo.import_lines(["2024-05-23 08:00-12:00", "# skipped"], today)

    assert result["changed"] == 1
    assert repo.is_dirty
    assert repo.get_month(2024, 5) is not None
    assert repo.get_week(2024, 21) is not None
    assert repo.get_year(2024) is not None


def test_configuration_backfills_defaults(isolated_app) -> None:
    configuration.APP_CONFIG_PATH.write_text(dump({"store_file": "hours.json"}))

    config = CONFIGURATION_REPO.get_config()

    assert config["store_file"] == "hours.json"
    assert config["parse_mode"] == "tolerant"
    assert config["log_level"] == "WARNING"


def test_configuration_update_and_flush(isolated_app) -> None:
    CONFIGURATION_REPO.update_config(editor="nano", parse_mode="strict")
    CONFIGURATION_REPO.flush()
    CONFIGURATION_REPO.update_config(remove_editor=True)

    assert CONFIGURATION_REPO.get_config()["editor"] is None
    text = configuration.APP_CONFIG_PATH.read_text()
    assert "editor: nano" in text
    assert "parse_mode: strict" in text


def test_repository_save_to_other_path(tmp_path) -> None:
    repo = StoreRepository(tmp_path / "times.json")
    repo.initialize(3.0)

    copy = tmp_path / "copy.json"
    repo.save(copy, pretty=True)

    assert repo.is_dirty
    assert not repo.exists()
    assert load_store(copy) == {"fee_per_hour": 3.0, "years": []}
    assert copy.read_text().startswith("{\n")
