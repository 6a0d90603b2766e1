import functools

from tapz.fmt import fmt, fmt_args


def _flatten(pipes):
    for p in pipes:
        yield from p._pipes if isinstance(p, Pipeline) else (p,)


class Pipeable:
    # numpy arrays defer `array >> pipeable` to __rrshift__ instead of broadcasting.
    # Values with their own __rshift__ (including pipeables) must be called directly: `tap(f)(value)`.
    __array_ufunc__ = None

    def __rshift__(self, other):
        return Pipeline(self, other)

    def __rrshift__(self, other):
        return self(other)


class Pipeline(Pipeable):
    def __init__(self, *pipes):
        self._pipes = tuple(_flatten(pipes))

    def __call__(self, arg):
        for p in self._pipes:
            arg = p(arg)

        return arg

    def __len__(self):
        return len(self._pipes)

    def __str__(self):
        return 'pipeline(' + ', '.join(fmt(p) for p in self._pipes) + ')'


class Function(Pipeable):
    def __init__(self, func, *args, **kwargs):
        self._func = func
        self._args = args
        self._kwargs = kwargs
        self._name = None

    def __call__(self, arg):
        return self._func(arg, *self._args, **self._kwargs)

    def set_name(self, name):
        self._name = name
        return self

    @property
    def __name__(self):
        return self._name or fmt(self._func)

    def __str__(self):
        return f'{self.__name__}({fmt_args(self._args, self._kwargs)})'

    __repr__ = __str__


def as_pipeable(func=None, *, name=None):
    """Turns `func(obj, *args)` into a factory of `Function(func, *args)`.

    The returned object is applied with `obj >> factory(*args)`.
    """
    if func is None:
        return functools.partial(as_pipeable, name=name)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        return Function(func, *args, **kwargs).set_name(name or func.__name__)

    return wrapper


fn = Function
