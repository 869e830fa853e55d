import asyncio
import sqlite3
from datetime import date

import pytest

from autos_api.app.core import db
from autos_api.app.core.exceptions import (
    AutoNotFoundException,
    InvalidAutoException,
    InvalidUpdateAutoException,
)
from autos_api.app.services.auto_service import AutoService

from tests.conftest import make_auto


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def seeded(database):
    """Store with a small mixed fleet."""
    fleet = [
        make_auto(vin="AAA1", color="red", make="Honda"),
        make_auto(vin="AAA2", color="Red", make="Toyota", model="Corolla"),
        make_auto(vin="AAA3", color="blue", make="Honda", model="Accord"),
        make_auto(vin="AAA4", color="blue", make="Ford", model="Focus", owner="Ann"),
    ]
    for auto in fleet:
        run(AutoService.add_auto(auto))
    return fleet


def vins(autos):
    return [auto.vin for auto in autos.autos_list]


def test_init_db_is_idempotent(database):
    db.init_db()
    conn = sqlite3.connect(database)
    try:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == [version for version, _ in db.MIGRATIONS]


def test_get_all_autos_on_empty_store(database):
    autos = run(AutoService.get_all_autos())
    assert autos.is_empty()
    assert len(autos) == 0


def test_get_all_autos_returns_everything_ordered_by_vin(seeded):
    assert vins(run(AutoService.get_all_autos())) == ["AAA1", "AAA2", "AAA3", "AAA4"]


def test_get_all_autos_filters_on_color_and_make(seeded):
    assert vins(run(AutoService.get_all_autos("red", "Honda"))) == ["AAA1"]
    assert run(AutoService.get_all_autos("green", "Honda")).is_empty()


def test_get_all_autos_by_color_ignores_case(seeded):
    assert vins(run(AutoService.get_all_autos_by_color("RED"))) == ["AAA1", "AAA2"]


def test_get_all_autos_by_make(seeded):
    assert vins(run(AutoService.get_all_autos_by_make("honda"))) == ["AAA1", "AAA3"]


def test_add_auto_returns_stored_auto_with_normalized_vin(database):
    created = run(AutoService.add_auto(make_auto(vin="  xx89dm ", owner="  ")))

    assert created.vin == "XX89DM"
    assert created.year == 2000
    assert created.owner is None
    assert run(AutoService.get_auto("xx89dm")) == created


def test_add_auto_rejects_duplicate_vin(seeded):
    with pytest.raises(InvalidAutoException, match="already exists"):
        run(AutoService.add_auto(make_auto(vin="aaa1")))


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"vin": " "}, "vin is required"),
        ({"make": ""}, "make is required"),
        ({"color": " "}, "color is required"),
        ({"model": ""}, "model is required"),
        ({"year": 1700}, "year must be between"),
        ({"year": date.today().year + 2}, "year must be between"),
    ],
)
def test_add_auto_rejects_invalid_auto(database, overrides, message):
    with pytest.raises(InvalidAutoException, match=message):
        run(AutoService.add_auto(make_auto(**overrides)))
    assert run(AutoService.get_all_autos()).is_empty()


def test_get_auto_returns_none_when_missing(database):
    assert run(AutoService.get_auto("NOPE")) is None


def test_update_auto_changes_color_and_owner(seeded):
    updated = run(AutoService.update_auto("AAA1", "blue", "David"))

    assert updated.color == "blue"
    assert updated.owner == "David"
    assert updated.make == "Honda"
    assert run(AutoService.get_auto("AAA1")) == updated


def test_update_auto_keeps_fields_that_are_not_supplied(seeded):
    updated = run(AutoService.update_auto("AAA4", "green", None))

    assert updated.color == "green"
    assert updated.owner == "Ann"


def test_update_auto_returns_none_when_missing(database):
    assert run(AutoService.update_auto("NOPE", "blue", "David")) is None


def test_update_auto_rejects_empty_update(seeded):
    with pytest.raises(InvalidUpdateAutoException):
        run(AutoService.update_auto("AAA1", None, " "))


def test_update_auto_validates_before_looking_up_vin(database):
    with pytest.raises(InvalidUpdateAutoException):
        run(AutoService.update_auto("NOPE", None, " "))


def test_update_auto_refreshes_updated_at(database, seeded):
    conn = sqlite3.connect(database)
    try:
        with conn:
            conn.execute("UPDATE autos SET updated_at = '2000-01-01 00:00:00' WHERE vin = 'AAA1'")

        run(AutoService.update_auto("AAA1", "green", None))

        (updated_at,) = conn.execute("SELECT updated_at FROM autos WHERE vin = 'AAA1'").fetchone()
    finally:
        conn.close()
    assert updated_at > "2000-01-01 00:00:00"


def test_delete_auto_removes_it(seeded):
    run(AutoService.delete_auto("aaa2"))

    assert run(AutoService.get_auto("AAA2")) is None
    assert len(run(AutoService.get_all_autos())) == 3


def test_delete_auto_raises_when_missing(database):
    with pytest.raises(AutoNotFoundException):
        run(AutoService.delete_auto("NOPE"))


def test_relative_database_url_resolves_against_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(db.settings, "database_url", "autos.db")

    assert db.get_database_path() == str((tmp_path / "autos.db").resolve())
