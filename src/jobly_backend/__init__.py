"""Jobly backend package wiring and entrypoints.

The entrypoints import :mod:`jobly_backend.main` lazily so that importing the
package does not build the ASGI app.
"""

from jobly_backend.settings import BackendSettings, get_settings, settings


def run_dev() -> None:
    from jobly_backend.main import run_dev as _run_dev

    _run_dev()


def run_prod() -> None:
    from jobly_backend.main import run_prod as _run_prod

    _run_prod()


def init_db() -> None:
    from jobly_backend.main import init_db as _init_db

    _init_db()


main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "init_db",
    "main",
    "run_dev",
    "run_prod",
    "settings",
]
