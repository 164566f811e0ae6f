"""
Request-scoped log fields.

``PubgClient`` binds the shard and resource of each call here. The fields
are read on the task that logs, so :class:`RequestContextFilter` stamps them
onto the record before it leaves that task; the JSON file handler formats on
the queue listener's thread, where the task's context is not visible.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Dict, Iterator, Mapping

CONTEXT_ATTR = "context"

_request_fields: ContextVar[Mapping[str, Any]] = ContextVar("pubg_request_fields", default={})


def _merged(values: Mapping[str, Any]) -> Dict[str, Any]:
    fields = dict(_request_fields.get())
    fields.update((k, v) for k, v in values.items() if v is not None)
    return fields


def get_context() -> Dict[str, Any]:
    return dict(_request_fields.get())


def bind(**values: Any) -> None:
    """Add fields for the rest of the current task. None values are dropped."""
    _request_fields.set(_merged(values))


def unbind(*keys: str) -> None:
    _request_fields.set({k: v for k, v in _request_fields.get().items() if k not in keys})


@contextmanager
def log_context(**values: Any) -> Iterator[Dict[str, Any]]:
    """``with log_context(shard="pc-eu", resource="players"): ...``"""
    token = _request_fields.set(_merged(values))
    try:
        yield get_context()
    finally:
        _request_fields.reset(token)


def record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields stamped on ``record``, or the live ones when it was never stamped."""
    stamped = getattr(record, CONTEXT_ATTR, None)
    if stamped is None:
        return get_context()
    return dict(stamped)


class RequestContextFilter(logging.Filter):
    """Copies the current request fields onto each record it passes."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, CONTEXT_ATTR, None) is None:
            setattr(record, CONTEXT_ATTR, get_context())
        return True
