import dataclasses
import typing

from tapz.functions import to_unary
from tapz.pipe import as_pipeable


@dataclasses.dataclass
class Needed:
    size: typing.Optional[int] = None

    def is_known(self) -> bool:
        return self.size is not None


@dataclasses.dataclass
class Done:
    remainder: typing.Any
    output: typing.Any


@dataclasses.dataclass
class Error:
    error: typing.Any


@dataclasses.dataclass
class Incomplete:
    needed: Needed = dataclasses.field(default_factory=Needed)


ParseResult = typing.Union[Done, Error, Incomplete]


def _check(obj):
    if not isinstance(obj, (Done, Error, Incomplete)):
        raise TypeError(f'expected Done, Error or Incomplete, got {type(obj).__name__}')


# noinspection PyPep8Naming
class parse:
    @staticmethod
    @as_pipeable(name='parse.tap_done')
    def tap_done(obj, func):
        """Calls `func((remainder, output))`, or `func(remainder, output)` for two-argument closures."""
        _check(obj)
        if isinstance(obj, Done):
            to_unary(func)((obj.remainder, obj.output))
        return obj

    @staticmethod
    @as_pipeable(name='parse.tap_error')
    def tap_error(obj, func):
        _check(obj)
        if isinstance(obj, Error):
            to_unary(func)(obj.error)
        return obj

    @staticmethod
    @as_pipeable(name='parse.tap_incomplete')
    def tap_incomplete(obj, func):
        _check(obj)
        if isinstance(obj, Incomplete):
            to_unary(func)(obj.needed)
        return obj
