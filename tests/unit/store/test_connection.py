import pytest

import typedstore
from typedstore import ExecutionError, Integer, Mode, OpenError, Text


def test_open_create_makes_datafile(db_path):
    with typedstore.open(db_path, Mode.CREATE) as conn:
        conn.execute("CREATE TABLE t (a INTEGER)")
    assert db_path.exists()


def test_open_read_missing_fails(db_path):
    with pytest.raises(OpenError, match="Could not open datafile"):
        typedstore.open(db_path, Mode.READ)
    assert not db_path.exists()


@pytest.mark.parametrize("mode", [Mode.READWRITE, Mode.CREATE])
def test_open_writable_missing_succeeds(db_path, mode):
    with typedstore.open(db_path, mode) as conn:
        assert not conn.closed
    assert db_path.exists()


def test_create_replaces_existing_datafile(db_path):
    with typedstore.open(db_path, "create") as conn:
        conn.execute("CREATE TABLE t (a INTEGER)")
        conn.insert("t", [("a", Integer(1))])

    with typedstore.open(db_path, "create") as conn:
        with pytest.raises(ExecutionError, match="no such table"):
            conn.query_all("SELECT a FROM t")


def test_create_removes_stale_journal_files(db_path):
    db_path.write_bytes(b"")
    journal = db_path.with_name(db_path.name + "-journal")
    journal.write_bytes(b"stale")

    with typedstore.open(db_path, "create"):
        pass
    assert not journal.exists()


def test_create_fails_when_path_cannot_be_removed(tmp_path):
    target = tmp_path / "occupied"
    target.mkdir()
    with pytest.raises(OpenError, match="Could not overwrite file at path"):
        typedstore.open(target, "create")
    assert target.is_dir()


def test_readwrite_keeps_existing_data(db_path):
    with typedstore.open(db_path, "create") as conn:
        conn.execute("CREATE TABLE t (a INTEGER)")
        conn.insert("t", [("a", Integer(5))])

    with typedstore.open(db_path, "readwrite") as conn:
        assert conn.query_all("SELECT a FROM t") == [(Integer(5),)]


def test_read_mode_rejects_writes(db_path):
    with typedstore.open(db_path, "create") as conn:
        conn.execute("CREATE TABLE t (a INTEGER)")

    with typedstore.open(db_path, "read") as conn:
        with pytest.raises(ExecutionError, match="Error writing to database"):
            conn.insert("t", [("a", Integer(1))])
        assert conn.query_all("SELECT a FROM t") == []


def test_read_mode_rejects_non_datafile(db_path):
    db_path.write_bytes(b"this is not a sqlite datafile\n" * 64)
    with pytest.raises(OpenError, match="not a database"):
        typedstore.open(db_path, "read")


def test_memory_datafile():
    with typedstore.open(":memory:", "create") as conn:
        conn.execute("CREATE TABLE t (a TEXT)")
        conn.insert("t", [("a", Text("x"))])
        assert conn.query_all("SELECT a FROM t") == [(Text("x"),)]


def test_mode_parses_strings():
    assert Mode.parse("READ") is Mode.READ
    assert Mode.parse(Mode.CREATE) is Mode.CREATE
    with pytest.raises(ValueError, match="Unknown open mode"):
        Mode.parse("append")


def test_configured_pragmas_applied(db_path):
    with typedstore.open(db_path, "create") as conn:
        assert conn.query_first("PRAGMA foreign_keys") == (Integer(1),)
        assert conn.query_first("PRAGMA busy_timeout") == (Integer(5000),)


def test_pragmas_override(db_path):
    with typedstore.open(db_path, "create", pragmas={}) as conn:
        assert conn.query_first("PRAGMA foreign_keys") == (Integer(0),)


def test_pragmas_from_config_file(isolated_home, db_path):
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.yaml").write_text("pragmas:\n  user_version: 42\n")
    with typedstore.open(db_path, "create") as conn:
        assert conn.query_first("PRAGMA user_version") == (Integer(42),)


def test_bad_pragma_fails_open(db_path):
    with pytest.raises(OpenError):
        typedstore.open(db_path, "create", pragmas={"no such syntax": 1})


def test_close_is_idempotent(db_path):
    conn = typedstore.open(db_path, "create")
    conn.close()
    conn.close()
    assert conn.closed


def test_closed_connection_fails_operations(db_path):
    conn = typedstore.open(db_path, "create")
    conn.close()
    with pytest.raises(ExecutionError, match="connection is closed"):
        conn.execute("CREATE TABLE t (a)")
    with pytest.raises(ExecutionError, match="connection is closed"):
        conn.query_all("SELECT 1")


def test_context_manager_closes_on_error(db_path):
    with pytest.raises(RuntimeError):
        with typedstore.open(db_path, "create") as conn:
            raise RuntimeError("boom")
    assert conn.closed


def test_slow_open_logs_warning(isolated_home, db_path, caplog):
    isolated_home.mkdir(parents=True)
    (isolated_home / "config.yaml").write_text("slow_open_seconds: -1\n")
    with caplog.at_level("WARNING", logger="typedstore.store.sqlite"):
        typedstore.open(db_path, "create").close()
    assert "took" in caplog.text


def test_repr_shows_state(db_path):
    conn = typedstore.open(db_path, "create")
    assert "open" in repr(conn)
    conn.close()
    assert "closed" in repr(conn)
