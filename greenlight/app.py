"""The WSGI application: routing, handlers and error responses."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any

from werkzeug.wrappers import Request, Response

from greenlight.jsonio import JSONBodyError, read_id_param, read_json, write_json
from greenlight.movies import Movie, validate_movie
from greenlight.runtime import Runtime, parse_runtime
from greenlight.validator import Validator

if TYPE_CHECKING:
    from greenlight.main import Config

VERSION = "1.0.0"

_ROUTES = (
    ("GET", re.compile(r"/v1/healthcheck"), "healthcheck_handler"),
    ("POST", re.compile(r"/v1/movies"), "create_movie_handler"),
    ("GET", re.compile(r"/v1/movies/(?P<id>[^/]+)"), "show_movie_handler"),
)


def _string(value: Any) -> str:
    if value is not None and not isinstance(value, str):
        raise TypeError(value)
    return value or ""


def _int32(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int) or not -(2**31) <= value < 2**31:
        raise TypeError(value)
    return value


def _string_list(value: Any) -> list[str] | None:
    if value is not None and not isinstance(value, list):
        raise TypeError(value)
    return None if value is None else [_string(item) for item in value]


_MOVIE_FIELDS = {"title": _string, "year": _int32, "runtime": parse_runtime, "genres": _string_list}


@dataclass
class Application:
    """The API as a WSGI callable."""

    config: Config
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("greenlight"))

    def __call__(self, environ, start_response):
        request = Request(environ)
        try:
            response = self._dispatch(request)
        except Exception as exc:  # noqa: BLE001 - any handler failure becomes a 500
            response = self.server_error_response(exc)
        return response(environ, start_response)

    def _dispatch(self, request: Request) -> Response:
        allowed = set()
        for method, regex, name in _ROUTES:
            match = regex.fullmatch(request.path)
            if match is None:
                continue
            if method == request.method:
                return getattr(self, name)(request, **match.groupdict())
            allowed.add(method)
        if not allowed:
            return self.not_found_response(request)
        allow = ", ".join([*sorted(allowed), "OPTIONS"])
        if request.method == "OPTIONS":
            return Response(status=200, headers={"Allow": allow})
        response = self.method_not_allowed_response(request)
        response.headers["Allow"] = allow
        return response

    def healthcheck_handler(self, request: Request) -> Response:
        """Report that the service is up, with its environment and version."""
        system_info = {"environment": self.config.env, "version": VERSION}
        return write_json(200, {"status": "available", "system_info": system_info})

    def create_movie_handler(self, request: Request) -> Response:
        """Validate a new movie from the request body and echo the input."""
        try:
            values = read_json(request.get_data(), _MOVIE_FIELDS)
        except JSONBodyError as exc:
            return self.bad_request_response(exc)
        movie = Movie(
            title=values.get("title", ""),
            year=values.get("year", 0),
            runtime=values.get("runtime", Runtime(0)),
            genres=values.get("genres"),
        )
        v = Validator()
        validate_movie(v, movie)
        if not v.valid():
            return self.failed_validation_response(v.field_errors)
        text = (
            f"{{Title:{movie.title} Year:{movie.year} Runtime:{int(movie.runtime)} "
            f"Genres:[{' '.join(movie.genres or [])}]}}\n"
        )
        return Response(text, status=200, content_type="text/plain; charset=utf-8")

    def show_movie_handler(self, request: Request, id: str) -> Response:
        """Return a sample movie carrying the requested id."""
        try:
            movie_id = read_id_param(id)
        except ValueError:
            return self.not_found_response(request)
        movie = Movie(
            id=movie_id,
            created_at=datetime.now(),
            title="Casablanca",
            runtime=Runtime(102),
            genres=["drama", "romance", "war"],
            version=1,
        )
        return write_json(200, {"movie": movie.to_dict()})

    def error_response(self, status: int, message: Any) -> Response:
        """Send ``message`` under the "error" key with ``status``."""
        try:
            return write_json(status, {"error": message})
        except (TypeError, ValueError) as exc:
            self.logger.error(exc)
            return Response(status=500)

    def server_error_response(self, err: BaseException) -> Response:
        """Log ``err`` and send a generic 500 response."""
        self.logger.error(err)
        return self.error_response(
            500, "the server encounter a problem and could not process your request!"
        )

    def not_found_response(self, request: Request) -> Response:
        """Send a 404 response."""
        return self.error_response(404, "the requestd resource could not be found!")

    def method_not_allowed_response(self, request: Request) -> Response:
        """Send a 405 response naming the rejected method."""
        return self.error_response(
            405, f"the {request.method} method is not supported for this resource!"
        )

    def bad_request_response(self, err: BaseException) -> Response:
        """Send a 400 response carrying the error's message."""
        return self.error_response(400, str(err))

    def failed_validation_response(self, errors: dict[str, str]) -> Response:
        """Send a 422 response with the per-field errors."""
        return self.error_response(422, dict(sorted(errors.items())))