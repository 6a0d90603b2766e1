import dataclasses
import logging
import os
import pathlib
import typing

import yaml

logger = logging.getLogger(__name__)

CONFIG_VAR = 'TAPZ_CONFIG'
ENV_PREFIX = 'TAPZ_'

_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


def to_flag(value, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ValueError(f'{name}: expected a boolean, got {value!r}')


@dataclasses.dataclass(frozen=True)
class Features:
    future: bool = False
    parse: bool = False

    @staticmethod
    def names() -> typing.Tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(Features))

    def merge(self, overrides: typing.Mapping[str, typing.Any]) -> 'Features':
        unknown = set(overrides) - set(Features.names())
        if unknown:
            raise ValueError(f'unknown features: {", ".join(sorted(unknown))}')
        return dataclasses.replace(self, **{k: to_flag(v, k) for k, v in overrides.items()})

    @staticmethod
    def load(path) -> 'Features':
        path = pathlib.Path(path)
        with path.open() as f:
            doc = yaml.safe_load(f) or {}
        if not isinstance(doc, dict):
            raise ValueError(f'{path}: expected a mapping, got {type(doc).__name__}')
        features = doc.get('features') or {}
        if not isinstance(features, dict):
            raise ValueError(f'{path}: "features" must be a mapping')
        return Features().merge(features)

    @staticmethod
    def from_env(environ=None) -> 'Features':
        environ = os.environ if environ is None else environ
        path = environ.get(CONFIG_VAR)
        result = Features.load(path) if path else Features()
        overrides = {}
        for name in Features.names():
            value = environ.get(ENV_PREFIX + name.upper())
            if value is not None:
                overrides[name] = to_flag(value, ENV_PREFIX + name.upper())
        result = result.merge(overrides)
        logger.debug('features: %s', result)
        return result


FEATURES = Features.from_env()
