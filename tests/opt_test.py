import pytest

from tapz import opt


def test_tap_some():
    seen = []
    assert 10 >> opt.tap_some(seen.append) == 10
    assert None >> opt.tap_some(seen.append) is None
    assert seen == [10]


def test_tap_some_on_falsy_values():
    seen = []
    assert 0 >> opt.tap_some(seen.append) == 0
    assert '' >> opt.tap_some(seen.append) == ''
    assert seen == [0, '']


def test_tap_some_mutates_payload():
    values = [1, 2]
    assert values >> opt.tap_some(lambda v: v.append(3)) is values
    assert values == [1, 2, 3]


def test_tap_none():
    foo = []
    assert None >> opt.tap_none(lambda: foo.append(10)) is None
    assert 9 >> opt.tap_none(lambda: foo.append(-1)) == 9
    assert foo == [10]


def test_exactly_one_arm_fires():
    calls = []
    pipe = opt.tap_some(lambda _: calls.append('some')) >> opt.tap_none(lambda: calls.append('none'))
    assert 5 >> pipe == 5
    assert None >> pipe is None
    assert calls == ['some', 'none']


def test_errors_propagate():
    def fail(_):
        raise KeyError('boom')

    with pytest.raises(KeyError, match='boom'):
        3 >> opt.tap_some(fail)
