"""Command-line entry point: configuration, database check and HTTP server."""

from __future__ import annotations

import argparse
import logging
import os
import re
import socket
import sys
import time
from dataclasses import dataclass
from urllib.parse import urlsplit

from werkzeug.serving import make_server

from greenlight.app import Application

_UNITS = {"ns": 1e-9, "us": 1e-6, "µs": 1e-6, "ms": 1e-3, "s": 1.0, "m": 60.0, "h": 3600.0}
_DURATION_RX = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")
_DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


@dataclass
class Config:
    """Server and database settings."""

    port: int = 4000
    env: str = "development"
    db_dsn: str = ""
    db_max_open_conns: int = 25
    db_max_idle_conns: int = 25
    db_max_idle_time: str = "15m"


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line flags."""
    parser = argparse.ArgumentParser(prog="greenlight")
    defaults = Config(db_dsn=os.environ.get("GREENLIGHT_DB_DSN", ""))
    for name, kind, help_text in (
        ("port", int, "Server port to listen on"),
        ("env", str, "Application environment {development|production}"),
        ("db-dsn", str, "PostgreSQL DSN"),
        ("db-max-open-conns", int, "PostgreSQL max open connections"),
        ("db-max-idle-conns", int, "PostgreSQL max idle connections"),
        ("db-max-idle-time", str, "PostgreSQL max connection idle time"),
    ):
        dest = name.replace("-", "_")
        parser.add_argument(f"-{name}", f"--{name}", dest=dest, type=kind,
                            default=getattr(defaults, dest), help=help_text)
    return Config(**vars(parser.parse_args(argv)))


def _parse_duration(text: str) -> float:
    """Parse a duration such as "15m" or "1h30m" into seconds."""
    rest = text.lstrip("+-") if text[:1] in ("+", "-") and text[1:2] not in "+-" else text
    if rest == "0":
        return 0.0
    matches = list(_DURATION_RX.finditer(rest))
    if not rest or "".join(m[0] for m in matches) != rest:
        raise ValueError(f'time: invalid duration "{text}"')
    sign = -1.0 if text[:1] == "-" else 1.0
    return sign * sum(float(m[1]) * _UNITS[m[2]] for m in matches)


def _check_database(cfg: Config) -> None:
    """Validate the idle time and make sure the database answers within 5 seconds."""
    _parse_duration(cfg.db_max_idle_time)
    if cfg.db_dsn.startswith(("postgres://", "postgresql://")):
        parts = urlsplit(cfg.db_dsn)
        host, port = parts.hostname, parts.port
    else:
        settings = dict(pair.partition("=")[::2] for pair in cfg.db_dsn.split())
        host, port = settings.get("host"), settings.get("port")
    host = host or os.environ.get("PGHOST", "localhost")
    port = int(port or os.environ.get("PGPORT", 5432))
    socket.create_connection((host, port), timeout=5.0).close()


def main(argv: list[str] | None = None) -> int:
    """Check the database, then serve the API until the server stops."""
    cfg = parse_args(argv)
    logger = logging.getLogger("greenlight.api")
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", _DATE_FORMAT))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.INFO)
    logger.propagate = False
    try:
        _check_database(cfg)
    except (ValueError, OSError) as exc:
        print(time.strftime(_DATE_FORMAT), exc, file=sys.stderr)
        return 1
    logger.info("database connection pool established")
    app = Application(config=cfg, logger=logger)
    logger.info("starting %s server on :%d", cfg.env, cfg.port)
    try:
        make_server("", cfg.port, app, threaded=True).serve_forever()
    except OSError as exc:
        logger.error(exc)
    return 1


if __name__ == "__main__":
    sys.exit(main())