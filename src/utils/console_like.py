from __future__ import annotations

from typing import Protocol

from loguru import logger


class ConsoleLike(Protocol):
    def info(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def ok(self, msg: str) -> None: ...


class LogConsole:
    """Console fallback that writes operator messages to the log.

    Lets the deploy pipeline run without importing the CLI console.
    """

    def info(self, msg: str) -> None:
        logger.info(msg)

    def warn(self, msg: str) -> None:
        logger.warning(msg)

    def ok(self, msg: str) -> None:
        logger.success(msg)


def coalesce_console(console: ConsoleLike | None) -> ConsoleLike:
    return console if console is not None else LogConsole()
