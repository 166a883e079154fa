import pytest

from stockapi.connection import ConnectionSetupError, connection, reset_connection


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.setenv("POSTGRESQL_URL", "unused")
    monkeypatch.delenv("POSTGRESQL_URL")
    monkeypatch.chdir(tmp_path)
    reset_connection()
    yield tmp_path
    reset_connection()


def test_missing_env_file(workdir):
    with pytest.raises(ConnectionSetupError, match="failed to load .env file"):
        connection()


def test_missing_url(workdir):
    (workdir / ".env").write_text("")
    with pytest.raises(ConnectionSetupError, match="POSTGRESQL_URL not set in environment"):
        connection()


def test_connects_from_env_file(workdir, capsys):
    db_path = workdir / "stocks.db"
    (workdir / ".env").write_text(f"POSTGRESQL_URL=sqlite:///{db_path}\n")
    engine = connection()
    assert engine.url.database == str(db_path)
    assert "Connected to Postgres successfully" in capsys.readouterr().out


def test_engine_is_shared_until_reset(workdir):
    (workdir / ".env").write_text(f"POSTGRESQL_URL=sqlite:///{workdir / 'a.db'}\n")
    first = connection()
    assert connection() is first
    reset_connection()
    second = connection()
    assert second is not first
    assert second.url == first.url


def test_environment_wins_over_env_file(workdir, monkeypatch):
    env_db = workdir / "env.db"
    (workdir / ".env").write_text(f"POSTGRESQL_URL=sqlite:///{workdir / 'file.db'}\n")
    monkeypatch.setenv("POSTGRESQL_URL", f"sqlite:///{env_db}")
    assert connection().url.database == str(env_db)


def test_ping_failure(workdir):
    unreachable = workdir / "missing" / "deeper" / "db.sqlite"
    (workdir / ".env").write_text(f"POSTGRESQL_URL=sqlite:///{unreachable}\n")
    with pytest.raises(ConnectionSetupError, match="failed to ping database"):
        connection()