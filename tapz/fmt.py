def fmt(f):
    if hasattr(f, '__name__'):
        return f.__name__
    if hasattr(f, '__qualname__'):
        return f.__qualname__
    return str(f)


def fmt_args(args, kwargs):
    return ', '.join([fmt(a) for a in args] + [f'{k}={fmt(v)}' for k, v in kwargs.items()])
