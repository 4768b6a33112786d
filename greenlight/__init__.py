"""A JSON API for movie records, served as a WSGI application, with its validation helpers."""

__version__ = "1.0.0"