"""Logging setup for the GrackDB CLI."""

from __future__ import annotations

import logging

# httpx logs every request line at INFO; keep that behind --verbose
_CHATTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, verbose: bool = False, force: bool = False) -> None:
    """Route provider logs to stderr.

    Diagnostics are reported through the ``grackdb_provider`` loggers, so INFO is
    the floor even without ``verbose``. Stdout stays free for JSON results.
    """

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s [%(name)s] %(message)s",
        force=force,
    )
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose else logging.WARNING)
