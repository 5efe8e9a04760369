import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, asdict
from typing import Iterator

logger = logging.getLogger(__name__)

_FALSE_VALUES = ('0', 'false', 'no', 'off')


def _strict_from_env() -> bool:
    raw = os.environ.get('ENUMIXIN_STRICT', '1')
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass
class Settings:
    """runtime settings shared by every enumerable"""
    # validate targets and callbacks before traversing
    strict: bool = True


_settings = Settings(strict=_strict_from_env())


def get_settings() -> Settings:
    """get the live settings object"""
    return _settings


@contextmanager
def strict_mode(enabled: bool) -> Iterator[Settings]:
    """temporarily switch precondition checks on or off"""
    previous = _settings.strict
    _settings.strict = bool(enabled)
    logger.debug(f"strict mode set: {asdict(_settings)}")
    try:
        yield _settings
    finally:
        _settings.strict = previous
        logger.debug(f"strict mode restored: {asdict(_settings)}")
