# SPDX-License-Identifier: MIT

import pendulum
import pytest
from yaml import dump

from reti import configuration
from reti.model.day import Day
from reti.model.store import Store
from reti.parser import ParseMode, parse_line
from reti.repository.configuration import CONFIGURATION_REPO
from reti.repository.store import STORE_REPO
from reti.template.store import get_store_template


@pytest.fixture
def today() -> pendulum.Date:
    return pendulum.date(2024, 6, 15)


@pytest.fixture
def store() -> Store:
    return get_store_template(100.0)


@pytest.fixture
def make_day(today):
    """Build a day from a legacy line, relative to the fixed `today`."""

    def _make_day(line: str, mode: ParseMode = ParseMode.TOLERANT) -> Day:
        return parse_line(line, today=today, mode=mode)

    return _make_day


@pytest.fixture
def isolated_app(tmp_path, monkeypatch):
    """Point configuration and store at a temporary directory."""
    config_path = tmp_path / "config.yaml"
    config_path.write_text(dump(configuration.get_default_configuration()))
    store_path = tmp_path / "times.json"

    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    monkeypatch.setattr(configuration, "DATA_PATH", tmp_path)
    monkeypatch.setattr(configuration, "DATA_STORE_PATH", store_path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    monkeypatch.setattr(STORE_REPO, "_path", None)
    monkeypatch.setattr(STORE_REPO, "_store", None)
    monkeypatch.setattr(STORE_REPO, "is_dirty", False)
    monkeypatch.setattr(STORE_REPO, "save_pretty", False)
    return tmp_path
