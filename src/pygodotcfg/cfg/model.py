# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 21:40:02
# @Author : Kariko Lin

"""
Godot ConfigFile structure: ordered sections of ordered key-value pairs.

Keys before the first `[section]` header live in the section-less
bucket, which is simply the section named `""`.
"""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping

from .consts import OBJECT_CLASS_KEY, STRING_ARRAY_CONSTRUCTORS


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class Vector2:
    x: float
    y: float


class PackedStringArray(list[str]):
    """A list of strings written with a string-array constructor.

    Compares equal to a plain list holding the same strings.
    `alias` keeps the constructor name it was read with,
    so Godot 3 `PoolStringArray(...)` won't turn into a Godot 4 one on save.
    """

    def __init__(
        self, items: Iterable[str] = (), alias: str = 'PackedStringArray'
    ) -> None:
        super().__init__(items)
        if alias not in STRING_ARRAY_CONSTRUCTORS:
            raise ValueError(f'unknown string array constructor: {alias}')
        self.alias = alias

    def __repr__(self) -> str:
        return f'{self.alias}({super().__repr__()})'


class ClassObject(dict[str, Any]):
    """`Object(ClassName, "prop": value, ...)` literal.

    It is a dict holding the class name under `OBJECT_CLASS_KEY`,
    plus one entry per property.
    """

    def __init__(
        self, class_name: str = 'Object',
        properties: Mapping[str, Any] | None = None
    ) -> None:
        super().__init__()
        self[OBJECT_CLASS_KEY] = class_name
        if properties:
            self.update(properties)

    @property
    def class_name(self) -> str:
        return self[OBJECT_CLASS_KEY]

    def properties(self) -> dict[str, Any]:
        return {k: v for k, v in self.items() if k != OBJECT_CLASS_KEY}


# Null | Boolean | Number | String | Color | Vector2
# | Array | Dictionary | ClassObject
Value = (
    None | bool | float | str | Color | Vector2
    | list[Any] | dict[str, Any]
)

_MISSING: Any = object()


class ConfigSection(MutableMapping[str, Value]):
    """Live view of one section.

    Shares storage with the owning `ConfigFile`,
    writes through this proxy show up in the document immediately.
    """

    def __init__(self, section_name: str, data: dict[str, Value]) -> None:
        self._name = section_name
        self._data = data

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> Value:
        return self._data[key]

    def __setitem__(self, key: str, value: Value) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, Value]:
        return self._data.copy()


class ConfigFile(MutableMapping[str, ConfigSection]):
    """A whole Godot config document, like `project.godot`
    or `export_presets.cfg`:

        ```ini
        config_version=5  ; section-less, see `self.get_value("", ...)`

        [application]
        config/name="Dodge the Creeps"
        config/tags=PackedStringArray("2d", "demo")
        ```

    Section and key order is insertion order, kept for round trips.
    """

    def __init__(self) -> None:
        self.__sections: dict[str, dict[str, Value]] = {}

    def __getitem__(self, key: str) -> ConfigSection:
        return ConfigSection(key, self.__sections[key])

    def __setitem__(
        self, key: str, value: ConfigSection | Mapping[str, Value]
    ) -> None:
        # shouldn't keep ptr to external dict in section setting.
        self.__sections[key] = (
            value.to_dict()
            if isinstance(value, ConfigSection)
            else dict(value)
        )

    def __delitem__(self, key: str) -> None:
        del self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'<ConfigFile sections={list(self.__sections)!r}>'

    def add_section(self, section: str) -> ConfigSection:
        """Create `section` if absent; an existing one is left untouched."""
        return ConfigSection(section, self.__sections.setdefault(section, {}))

    def get_value(
        self, section: str, key: str, default: Any = _MISSING
    ) -> Value:
        """Look up `key` in `section`.

        Raises `KeyError` if either is missing and no `default` is given.
        Any `default`, `None` included, suppresses the error.
        """
        try:
            return self.__sections[section][key]
        except KeyError:
            if default is not _MISSING:
                return default
            if section not in self.__sections:
                raise KeyError(
                    f'section "{section}" not found '
                    'and no default value provided') from None
            raise KeyError(
                f'key "{key}" not found in section "{section}" '
                'and no default value provided') from None

    def set_value(self, section: str, key: str, value: Value) -> None:
        self.__sections.setdefault(section, {})[key] = value

    def has_section(self, section: str) -> bool:
        return section in self.__sections

    def has_section_key(self, section: str, key: str) -> bool:
        return key in self.__sections.get(section, {})

    def get_sections(self) -> list[str]:
        return list(self.__sections)

    def get_section_keys(self, section: str) -> list[str]:
        return list(self.__sections.get(section, {}))

    def erase_section(self, section: str) -> None:
        del self[section]

    def erase_section_key(self, section: str, key: str) -> None:
        del self.__sections[section][key]
        # Godot drops the section together with its last key.
        if not self.__sections[section]:
            del self.__sections[section]

    def clear(self) -> None:
        self.__sections.clear()
