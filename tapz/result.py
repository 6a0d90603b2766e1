import dataclasses
import typing

from tapz.functions import to_unary
from tapz.pipe import as_pipeable


@dataclasses.dataclass
class Ok:
    value: typing.Any = None

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False


@dataclasses.dataclass
class Err:
    error: typing.Any = None

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True


Result = typing.Union[Ok, Err]


def _check(obj):
    if not isinstance(obj, (Ok, Err)):
        raise TypeError(f'expected Ok or Err, got {type(obj).__name__}')


# noinspection PyPep8Naming
class res:
    @staticmethod
    @as_pipeable(name='res.tap_ok')
    def tap_ok(obj, func):
        _check(obj)
        if isinstance(obj, Ok):
            to_unary(func)(obj.value)
        return obj

    @staticmethod
    @as_pipeable(name='res.tap_err')
    def tap_err(obj, func):
        _check(obj)
        if isinstance(obj, Err):
            to_unary(func)(obj.error)
        return obj
