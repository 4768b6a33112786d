import socket
from unittest import mock

import pytest

from greenlight.app import Application
from greenlight.main import Config, main, parse_args


def _closed_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def test_parse_args_defaults(monkeypatch):
    monkeypatch.delenv("GREENLIGHT_DB_DSN", raising=False)
    cfg = parse_args([])
    assert cfg == Config()
    assert cfg.port == 4000
    assert cfg.env == "development"
    assert cfg.db_max_open_conns == 25
    assert cfg.db_max_idle_conns == 25
    assert cfg.db_max_idle_time == "15m"


def test_parse_args_dsn_from_environment(monkeypatch):
    monkeypatch.setenv("GREENLIGHT_DB_DSN", "host=db.example.com dbname=greenlight")
    assert parse_args([]).db_dsn == "host=db.example.com dbname=greenlight"


def test_parse_args_overrides():
    cfg = parse_args(["-port=8080", "-env", "production", "--db-max-idle-conns", "5"])
    assert cfg.port == 8080
    assert cfg.env == "production"
    assert cfg.db_max_idle_conns == 5


def test_parse_args_rejects_bad_integer():
    with pytest.raises(SystemExit) as info:
        parse_args(["-port", "abc"])
    assert info.value.code == 2


def test_main_invalid_idle_time(capsys):
    assert main(["-db-max-idle-time", "bogus"]) == 1
    assert "bogus" in capsys.readouterr().err


def test_main_unreachable_database(capsys):
    port = _closed_port()
    assert main(["-db-dsn", f"host=127.0.0.1 port={port}"]) == 1
    captured = capsys.readouterr()
    assert captured.err.strip()
    assert "database connection pool established" not in captured.out


def test_main_starts_server_when_database_reachable(capsys):
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.bind(("127.0.0.1", 0))
        listener.listen(1)
        port = listener.getsockname()[1]
        with mock.patch("greenlight.main.make_server") as fake:
            result = main(["-db-dsn", f"host=127.0.0.1 port={port}", "-port", "4000"])
    assert result == 1
    args, kwargs = fake.call_args
    assert args[1] == 4000
    assert isinstance(args[2], Application)
    assert args[2].config.port == 4000
    fake.return_value.serve_forever.assert_called_once_with()
    out = capsys.readouterr().out
    assert "database connection pool established" in out
    assert "starting development server on :4000" in out