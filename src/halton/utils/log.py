from __future__ import annotations
import logging

# Applications attach handlers; the library stays silent by default.
logger = logging.getLogger("halton")
logger.addHandler(logging.NullHandler())


def _log(msg: str, level: int = logging.DEBUG) -> None:
    if logger.isEnabledFor(level):
        logger.log(level, msg)


__all__ = ["logger"]
