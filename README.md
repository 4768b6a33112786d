# greenlight

A small JSON API for movie records, written as a WSGI application on top of
Werkzeug.

## Endpoints

| Method | Path              | Description                                              |
|--------|-------------------|----------------------------------------------------------|
| GET    | `/v1/healthcheck` | Reports the service status, environment and version      |
| POST   | `/v1/movies`      | Validates a new movie sent as a JSON body                |
| GET    | `/v1/movies/:id`  | Returns a sample movie ("Casablanca") carrying that id   |

JSON responses are wrapped in an envelope with a single key, such as `movie`,
`status` or `error`, and are written tab-indented with a trailing newline.

### Request bodies

`POST /v1/movies` accepts one JSON object of at most 1 MB (1,048,576 bytes):

```json
{
  "title": "Casablanca",
  "year": 1942,
  "runtime": "102 mins",
  "genres": ["drama", "romance", "war"]
}
```

Field names match case-insensitively. The runtime is written as `"<n> mins"`.
Unknown fields, malformed JSON, wrong field types, a malformed runtime, empty
bodies, oversized bodies and more than one JSON value are rejected with
`400 Bad Request`. A body that parses but fails validation (missing title, a
title over 500 bytes, a missing year, a year before 1888 or in the future, a
missing or non-positive runtime, missing genres, fewer than one or more than
five genres, or duplicate genres) is answered with `422 Unprocessable Entity`
and an `error` object that maps each field to its first message.

A valid body is answered with `200 OK` and a plain-text echo of the input,
for example:

```
{Title:Casablanca Year:1942 Runtime:102 Genres:[drama romance war]}
```

### Errors

Unknown paths, and movie ids that are not positive integers, give
`404 Not Found`. A known path with the wrong method gives
`405 Method Not Allowed` with an `Allow` header; `OPTIONS` on a known path
answers `200 OK` with the same header. An exception raised inside a handler is
logged and turned into `500 Internal Server Error`.

## Running the server

```
greenlight --port 4000 --env development
```

| Option                | Default                          |
|-----------------------|----------------------------------|
| `--port`              | `4000`                           |
| `--env`               | `development`                    |
| `--db-dsn`            | `GREENLIGHT_DB_DSN` env variable |
| `--db-max-open-conns` | `25`                             |
| `--db-max-idle-conns` | `25`                             |
| `--db-max-idle-time`  | `15m`                            |

Each option may also be given with a single dash (`-port 4000`). Run
`greenlight --help` for the full list.

Before serving, the command checks that `--db-max-idle-time` is a valid
duration (such as `15m` or `1h30m`) and that the database host named in the
DSN (a `postgres://` URL or `key=value` pairs, falling back to `PGHOST` /
`PGPORT`, then `localhost:5432`) accepts a TCP connection within five seconds.
If either check fails it prints the error and exits with status 1. Log lines go
to standard output.

## Using the pieces from Python

`greenlight.app.Application` is a WSGI callable, so it can be mounted in any
WSGI server or driven with Werkzeug's test client:

```python
from werkzeug.test import Client
from greenlight.app import Application
from greenlight.main import Config

client = Client(Application(config=Config()))
response = client.get("/v1/healthcheck")
```

The building blocks are available on their own as well:

```python
from greenlight.validator import Validator
from greenlight.movies import Movie, validate_movie
from greenlight.runtime import parse_runtime

v = Validator()
movie = Movie(title="Casablanca", year=1942,
              runtime=parse_runtime("102 mins"),
              genres=["drama", "romance", "war"])
validate_movie(v, movie)
assert v.valid()
```

- `greenlight.validator`: `Validator` with `valid`, `add_field_error` and
  `check`, plus `is_in`, `matches`, `unique` and the `EMAIL_RX` pattern.
- `greenlight.runtime`: `Runtime`, `parse_runtime` and
  `InvalidRuntimeFormatError`.
- `greenlight.movies`: `Movie` (with `to_dict`) and `validate_movie`.
- `greenlight.jsonio`: `read_json`, `write_json`, `read_id_param` and
  `JSONBodyError`.
- `greenlight.main`: `Config`, `parse_args` and `main`.

## What it does not do

There is no storage. Movies sent to `POST /v1/movies` are validated and echoed
but not saved, and `GET /v1/movies/:id` always returns the same sample movie.
The database options are only used for the startup reachability check; the
connection-pool settings (`--db-max-open-conns`, `--db-max-idle-conns`) are
accepted but have no effect, and no database queries are ever made.