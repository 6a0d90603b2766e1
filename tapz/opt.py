from tapz.functions import to_unary
from tapz.pipe import as_pipeable


# noinspection PyPep8Naming
class opt:
    """Taps for optional values: `None` is absent, anything else is present."""

    @staticmethod
    @as_pipeable(name='opt.tap_some')
    def tap_some(obj, func):
        if obj is not None:
            to_unary(func)(obj)
        return obj

    @staticmethod
    @as_pipeable(name='opt.tap_none')
    def tap_none(obj, func):
        if obj is None:
            func()
        return obj
