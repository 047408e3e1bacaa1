from __future__ import annotations
from typing import Protocol, runtime_checkable


@runtime_checkable
class LoggerLikeProtocol(Protocol):
    """Logging surface the parser, renderer, loader and engine write to.

    `logging.Logger` and `logging.LoggerAdapter` both satisfy it. DEBUG carries
    compile/render detail, ERROR is emitted right before a failure is
    re-raised, and `isEnabledFor` lets render tracing skip building context
    dictionaries nobody will see.
    """

    def debug(self, msg: str, *args, **kwargs) -> None: ...

    def error(self, msg: str, *args, **kwargs) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...


@runtime_checkable
class LoggerFactoryProtocol(Protocol):
    """Source of per-component loggers ("engine", "parse", "render", ...)."""

    def get_logger(self, name: str) -> LoggerLikeProtocol:
        ...
