import asyncio
import concurrent.futures
import copy
import enum

import wrapt

from tapz.functions import to_unary
from tapz.pipe import as_pipeable

_PROTOCOL = ('done', 'exception', 'result')
_EXC_LINKS = ('__traceback__', '__cause__', '__context__', '__suppress_context__')


class Resolution(enum.Enum):
    READY = 'ready'
    NOT_READY = 'not_ready'
    FAILED = 'failed'


class ReadOnlyView(wrapt.ObjectProxy):
    """Forwards reads to the wrapped object and refuses attribute and item writes."""

    def __setattr__(self, name, value):
        raise AttributeError(f'read-only view: cannot set {name!r}')

    def __delattr__(self, name):
        raise AttributeError(f'read-only view: cannot delete {name!r}')

    def __setitem__(self, key, value):
        raise TypeError('read-only view does not support item assignment')

    def __delitem__(self, key):
        raise TypeError('read-only view does not support item deletion')


def snapshot(payload):
    """Deep copy of `payload`, or a read-only view when it cannot be copied.

    Exception copies keep the traceback and chaining of the original.
    """
    try:
        copied = copy.deepcopy(payload)
    except Exception:
        return ReadOnlyView(payload)
    if isinstance(payload, BaseException):
        for name in _EXC_LINKS:
            setattr(copied, name, getattr(payload, name))
    return copied


def _check(future):
    if not all(callable(getattr(future, name, None)) for name in _PROTOCOL):
        raise TypeError(f'expected a future, got {type(future).__name__}')


def resolve(future):
    """Returns `(resolution, payload)` for the current state of `future` without waiting on it."""
    _check(future)
    if not future.done():
        return Resolution.NOT_READY, None
    try:
        error = future.exception()
    except (asyncio.CancelledError, concurrent.futures.CancelledError) as cancelled:
        return Resolution.FAILED, cancelled
    if error is not None:
        return Resolution.FAILED, error
    return Resolution.READY, future.result()


# noinspection PyPep8Naming
class fut:
    @staticmethod
    @as_pipeable(name='fut.tap_ready')
    def tap_ready(future, func):
        resolution, payload = resolve(future)
        if resolution is Resolution.READY:
            to_unary(func)(snapshot(payload))
        return future

    @staticmethod
    @as_pipeable(name='fut.tap_not_ready')
    def tap_not_ready(future, func):
        resolution, _ = resolve(future)
        if resolution is Resolution.NOT_READY:
            func()
        return future

    @staticmethod
    @as_pipeable(name='fut.tap_err')
    def tap_err(future, func):
        resolution, payload = resolve(future)
        if resolution is Resolution.FAILED:
            to_unary(func)(snapshot(payload))
        return future
