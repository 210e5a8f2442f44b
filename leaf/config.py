"""
Параметры парсера.

Значения по умолчанию воспроизводят базовую грамматику. Параметры можно
загрузить из YAML-файла вида:

    sigil: "#"
    balanced_bodies: false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError
from .utils import is_alphanumeric

_LOG = logging.getLogger(__name__)

_YAML = YAML(typ="safe")

# Байты, занятые грамматикой тега, не могут быть сигилом
_RESERVED = frozenset(b'(){}",\\ \n+-<>.')


@dataclass(frozen=True)
class ParserOptions:
    """
    Настройки грамматики.

    sigil: однобайтовый ASCII-символ, открывающий тег.
    balanced_bodies: учитывать вложенность фигурных скобок в теле тега.
        По умолчанию тело заканчивается на первой неэкранированной `}`.
    """
    sigil: str = "#"
    balanced_bodies: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sigil, str) or len(self.sigil) != 1 or not self.sigil.isascii():
            raise ConfigError(f"sigil: expected a single ASCII character, got {self.sigil!r}")
        byte = ord(self.sigil)
        if byte in _RESERVED or is_alphanumeric(byte) or byte < 0x20:
            raise ConfigError(f"sigil: {self.sigil!r} is reserved by the tag grammar")
        if not isinstance(self.balanced_bodies, bool):
            raise ConfigError(f"balanced_bodies: expected bool, got {self.balanced_bodies!r}")

    @property
    def sigil_byte(self) -> int:
        return ord(self.sigil)


DEFAULT_OPTIONS = ParserOptions()


def options_from_mapping(data: Mapping[str, Any] | None) -> ParserOptions:
    """Строит ParserOptions из словаря, отвергая неизвестные ключи."""
    if data is None:
        return DEFAULT_OPTIONS
    if not isinstance(data, Mapping):
        raise ConfigError(f"expected mapping, got {type(data).__name__}")

    known = {f.name for f in fields(ParserOptions)}
    unknown = sorted(str(k) for k in data if k not in known)
    if unknown:
        raise ConfigError(f"unknown option(s): {', '.join(unknown)}")

    _LOG.debug("Parser options from mapping: %r", dict(data))
    return ParserOptions(**dict(data))


def load_options(path: Path) -> ParserOptions:
    """
    Загружает параметры парсера из YAML-файла.

    Пустой файл даёт параметры по умолчанию.
    """
    try:
        raw = _YAML.load(path.read_text(encoding="utf-8"))
    except YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: cannot read options file: {e}") from e

    try:
        return options_from_mapping(raw)
    except ConfigError as e:
        raise ConfigError(f"{path}: {e}") from e


__all__ = ["ParserOptions", "DEFAULT_OPTIONS", "options_from_mapping", "load_options"]
