import pytest

from tapz import opt, res, tap
from tapz.pipe import Pipeline, as_pipeable, fn


@as_pipeable
def add(obj, n):
    return obj + n


def test_function_binds_arguments():
    assert 1 >> add(2) == 3
    assert add(2)(1) == 3


def test_pipeline_flattens():
    pipe = add(1) >> (add(2) >> add(3))
    assert isinstance(pipe, Pipeline)
    assert len(pipe) == 3
    assert 0 >> pipe == 6


def test_fn():
    assert 'abc' >> fn(str.upper) == 'ABC'
    assert 10 >> fn(divmod, 3) == (3, 1)


def test_names():
    assert str(add(2)) == 'add(2)'
    assert str(fn(divmod, 3)) == 'divmod(3)'
    assert str(tap(print)) == 'tap(print)'
    assert str(opt.tap_some(print) >> res.tap_err(print)) == 'pipeline(opt.tap_some, res.tap_err)'


def test_kwargs_in_name():
    @as_pipeable(name='scale')
    def scale(obj, factor=1, offset=0):
        return obj * factor + offset

    assert 2 >> scale(3, offset=1) == 7
    assert str(scale(3, offset=1)) == 'scale(3, offset=1)'


class Shifty:
    def __rshift__(self, other):
        return 'shifted'


def test_values_with_own_rshift_are_called_directly():
    seen = []
    value = Shifty()
    assert value >> tap(seen.append) == 'shifted'
    assert tap(seen.append)(value) is value
    assert seen == [value]


def test_pipeable_can_be_tapped_by_call():
    seen = []
    inner = add(1)
    assert tap(seen.append)(inner) is inner
    assert seen == [inner]


def test_numpy_array_is_tapped_whole():
    np = pytest.importorskip('numpy')
    seen = []
    arr = np.array([1, 2, 3])
    assert arr >> tap(seen.append) is arr
    assert len(seen) == 1
