import inspect
import logging
from inspect import Parameter


def do_nothing(*_, **__):
    pass


def identity(arg):
    return arg


def to_unary(func):
    def is_required(p):
        return p.kind is Parameter.POSITIONAL_OR_KEYWORD and p.default is p.empty

    if func is None:
        return identity

    try:
        arg_count = sum(1 for p in inspect.signature(func).parameters.values() if is_required(p))
    except (TypeError, ValueError):
        return func

    if arg_count > 1:
        def result(arg):
            return func(*arg)

        return result

    return func


def logged(msg=None, logger=None, level=logging.INFO):
    """Closure that logs whatever payload it receives.

    Arms without a payload (`opt.tap_none`, `fut.tap_not_ready`) call it with no
    arguments, in which case `msg` is logged verbatim. Without `msg` the payload
    is logged as `%r`, or `(no value)` when there is none.
    """
    logger = logger or logging.getLogger('tapz')

    def result(*args):
        if msg is not None:
            logger.log(level, msg, *args)
        elif args:
            logger.log(level, '%r', *args)
        else:
            logger.log(level, '(no value)')

    return result
