# SPDX-License-Identifier: MIT

import json
from pathlib import Path
from typing import Any, Iterable, Optional

import pendulum
import structlog

from reti import configuration, time
from reti.errors import SnapshotDecodeError, StorageError
from reti.model.day import Day
from reti.model.month import Month
from reti.model.part import Part
from reti.model.store import Store
from reti.model.week import Week
from reti.model.year import Year
from reti.parser import ParseMode
from reti.service import legacy
from reti.service import store as store_service
from reti.template.store import get_store_template

log = structlog.get_logger(__name__)


def convert_store_for_serialization(store: Store) -> dict[str, Any]:
    return {
        "fee_per_hour": store["fee_per_hour"],
        "years": [
            {
                "year": year["year"],
                "days": [
                    {
                        "date": time.date_to_iso_str(day["date"]),
                        "parts": [
                            {
                                "start": time.time_to_str(part["start"]),
                                "stop": time.time_to_str_optional(part["stop"]),
                                "factor": part["factor"],
                            }
                            for part in day["parts"]
                        ],
                        "comment": day["comment"],
                    }
                    for day in year["days"]
                ],
            }
            for year in store["years"]
        ],
    }


def __convert_part_for_deserialization(raw_part: dict[str, Any]) -> Part:
    factor = raw_part.get("factor")
    return {
        "start": time.time_from_str(raw_part["start"]),
        "stop": time.time_from_str_optional(raw_part.get("stop")),
        "factor": float(factor) if factor is not None else None,
    }


def __convert_day_for_deserialization(raw_day: dict[str, Any]) -> Day:
    return {
        "date": time.date_from_iso_str(raw_day["date"]),
        "parts": [
            __convert_part_for_deserialization(raw_part)
            for raw_part in raw_day["parts"]
        ],
        "comment": raw_day.get("comment"),
    }


def __convert_year_for_deserialization(raw_year: dict[str, Any]) -> Year:
    return {
        "year": int(raw_year["year"]),
        "days": [
            __convert_day_for_deserialization(raw_day) for raw_day in raw_year["days"]
        ],
    }


def convert_store_for_deserialization(raw_store: dict[str, Any]) -> Store:
    """
    Build a store from a decoded snapshot.

    Raises SnapshotDecodeError on any missing key or malformed value,
    a partially decoded store is never returned.
    """
    try:
        return {
            "fee_per_hour": float(raw_store["fee_per_hour"]),
            "years": [
                __convert_year_for_deserialization(raw_year)
                for raw_year in raw_store["years"]
            ],
        }
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise SnapshotDecodeError(f"Malformed snapshot: {e}") from e


def load_store(path: Path) -> Store:
    try:
        text = path.read_text()
    except OSError as e:
        raise StorageError(f"Unable to read {path}: {e}") from e
    try:
        raw_store = json.loads(text)
    except ValueError as e:
        raise SnapshotDecodeError(f"{path} is not valid JSON: {e}") from e
    return convert_store_for_deserialization(raw_store)


def save_store(store: Store, path: Path, pretty: bool = False) -> None:
    serializable_store = convert_store_for_serialization(store)
    if pretty:
        text = json.dumps(serializable_store, indent=2)
    else:
        text = json.dumps(serializable_store)
    try:
        path.write_text(text)
    except OSError as e:
        raise StorageError(f"Unable to write {path}: {e}") from e


class StoreRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._store: Optional[Store] = None
        self.is_dirty = False
        self.save_pretty = False

    @property
    def path(self) -> Path:
        if self._path is None:
            return configuration.DATA_STORE_PATH
        return self._path

    def set_path(self, path: Path) -> None:
        self._path = path
        self._store = None
        self.is_dirty = False

    @property
    def store(self) -> Store:
        if self._store is None:
            self.__load_data()
        if self._store is None:
            raise ValueError()
        return self._store

    def __load_data(self) -> None:
        self._store = load_store(self.path)
        log.debug("store_loaded", path=str(self.path), years=len(self._store["years"]))

    def save(self, path: Optional[Path] = None, pretty: Optional[bool] = None) -> None:
        """Write the store now, to `path` if given, without touching is_dirty."""
        if path is None:
            path = self.path
        if pretty is None:
            pretty = self.save_pretty
        save_store(self.store, path, pretty)
        log.debug("store_saved", path=str(path))

    def flush(self) -> bool:
        if self._store is not None and self.is_dirty:
            self.save()
            self.is_dirty = False
            return True
        return False

    def exists(self) -> bool:
        return self.path.is_file()

    def initialize(self, fee_per_hour: float = 0.0) -> None:
        """Start over with an empty store, replacing the file on flush."""
        self._store = get_store_template(fee_per_hour)
        self.is_dirty = True

    def __mark(self, changed: bool) -> bool:
        if changed:
            self.is_dirty = True
        return changed

    def add_part(self, date: pendulum.Date, part: Part) -> bool:
        return self.__mark(store_service.add_part(self.store, date, part))

    def add_day(self, day: Day) -> bool:
        return self.__mark(store_service.add_day(self.store, day))

    def add_day_force(self, day: Day) -> bool:
        return self.__mark(store_service.add_day_force(self.store, day))

    def remove_day(self, date: pendulum.Date) -> bool:
        return self.__mark(store_service.remove_day(self.store, date))

    def import_lines(
        self,
        lines: Iterable[str],
        today: Optional[pendulum.Date] = None,
        mode: ParseMode = ParseMode.TOLERANT,
    ) -> legacy.ImportResult:
        result = legacy.import_lines(self.store, lines, today, mode)
        self.__mark(result["changed"] > 0)
        return result

    def edit_lines(
        self,
        lines: Iterable[str],
        today: Optional[pendulum.Date] = None,
        mode: ParseMode = ParseMode.TOLERANT,
    ) -> legacy.ImportResult:
        result = legacy.edit_lines(self.store, lines, today, mode)
        self.__mark(result["changed"] > 0)
        return result

    def get_year(self, year: int) -> Optional[Year]:
        return store_service.get_year(self.store, year)

    def get_month(self, year: int, month: int) -> Optional[Month]:
        return store_service.get_month(self.store, year, month)

    def get_week(self, year: int, week: int) -> Optional[Week]:
        return store_service.get_week(self.store, year, week)

    def get_day(self, year: int, month: int, day: int) -> Optional[Day]:
        return store_service.get_day(self.store, year, month, day)

    def get_fee(self) -> float:
        return store_service.get_fee(self.store)

    def set_fee(self, fee: float) -> None:
        store_service.set_fee(self.store, fee)
        self.is_dirty = True


STORE_REPO = StoreRepository()
