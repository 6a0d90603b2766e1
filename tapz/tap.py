from tapz.functions import to_unary
from tapz.pipe import as_pipeable


@as_pipeable
def tap(obj, func):
    to_unary(func)(obj)
    return obj
