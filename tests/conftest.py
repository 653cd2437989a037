import pytest

import typedstore
from typedstore import config


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    """Point config lookups at an empty per-test home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("TYPEDSTORE_HOME", str(home))
    config.clear_cache()
    yield home
    config.clear_cache()


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def conn(db_path):
    """Fresh datafile with table t (a INTEGER, b TEXT) and untyped table v (x)."""
    with typedstore.open(db_path, "create") as c:
        c.execute("CREATE TABLE t (a INTEGER, b TEXT)")
        c.execute("CREATE TABLE v (x)")
        yield c
