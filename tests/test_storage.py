import sqlite3

from pomotimer.data.storage import SCHEMA_VERSION, Storage


def test_init_db_creates_file_and_schema(tmp_path) -> None:
    db = tmp_path / "nested" / "pomotimer.db"
    storage = Storage(db)
    storage.init_db()

    assert db.exists()
    assert storage.schema_version() == SCHEMA_VERSION


def test_init_db_is_repeatable(tmp_path) -> None:
    storage = Storage(tmp_path / "pomotimer.db")
    storage.init_db()
    storage.init_db()

    with storage._connect() as conn:  # noqa: SLF001 - tests may inspect DB directly
        rows = conn.execute("SELECT version FROM schema_version").fetchall()
    assert len(rows) == 1


def test_set_get_setting(tmp_path) -> None:
    storage = Storage(tmp_path / "pomotimer.db")
    storage.init_db()
    storage.set_setting("work_minutes", 25)
    storage.set_setting("break_minutes", 4.5)

    assert storage.get_setting("work_minutes") == 25
    assert storage.get_setting("break_minutes") == 4.5
    assert storage.get_setting("missing", "x") == "x"


def test_set_setting_overwrites(tmp_path) -> None:
    storage = Storage(tmp_path / "pomotimer.db")
    storage.init_db()
    storage.set_setting("work_minutes", 25)
    storage.set_setting("work_minutes", 50)

    assert storage.get_setting("work_minutes") == 50


def test_non_json_value_is_returned_raw(tmp_path) -> None:
    storage = Storage(tmp_path / "pomotimer.db")
    storage.init_db()
    conn = sqlite3.connect(storage.db_path)
    conn.execute("INSERT INTO settings(key, value) VALUES('legacy', 'not json')")
    conn.commit()
    conn.close()

    assert storage.get_setting("legacy") == "not json"
