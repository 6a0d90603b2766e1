from tapz.config import FEATURES, Features
from tapz.functions import do_nothing, identity, logged, to_unary
from tapz.opt import opt
from tapz.pipe import Function, Pipeable, Pipeline, as_pipeable, fn
from tapz.result import Err, Ok, Result, res
from tapz.tap import tap

__all__ = [
    'FEATURES', 'Features',
    'do_nothing', 'identity', 'logged', 'to_unary',
    'opt',
    'Function', 'Pipeable', 'Pipeline', 'as_pipeable', 'fn',
    'Err', 'Ok', 'Result', 'res',
    'tap',
]

if FEATURES.future:
    from tapz.future import fut

    __all__ += ['fut']

if FEATURES.parse:
    from tapz.parse import Done, Error, Incomplete, Needed, ParseResult, parse

    __all__ += ['Done', 'Error', 'Incomplete', 'Needed', 'ParseResult', 'parse']
