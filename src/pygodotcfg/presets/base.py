# -*- encoding: utf-8 -*-
# @File   : base.py
# @Time   : 2026/10/15 01:06:33
# @Author : Kariko Lin

"""Default presets, as a fresh Godot editor would add them.

Templates live in `data/<platform>_v<major>.yaml`, where string arrays
are tagged by `!PackedStringArray` or `!PoolStringArray`.
"""

import re
from copy import deepcopy
from functools import lru_cache
from os.path import dirname, exists, join
from typing import Literal, TypeAlias

import yaml

from ..cfg import PackedStringArray
from .model import ExportPreset

__all__ = [
    'Platform', 'GodotMajorVersion', 'SUPPORTED_VERSIONS',
    'get_major_version', 'has_base_preset', 'get_base_preset',
    'get_base_preset_android_v3', 'get_base_preset_android_v4',
    'get_base_preset_ios_v3', 'get_base_preset_ios_v4'
]

Platform: TypeAlias = Literal['Android', 'iOS']
GodotMajorVersion: TypeAlias = Literal[3, 4]

SUPPORTED_VERSIONS = (3, 4)
_DATA_DIR = join(dirname(__file__), 'data')
_VERSION = re.compile(r'^\s*v?(\d+)(?:\.\d+)*')


class _PresetLoader(yaml.FullLoader):
    pass


def _string_array(alias: str):
    def construct(loader: yaml.Loader, node: yaml.Node) -> PackedStringArray:
        return PackedStringArray(
            [str(i) for i in loader.construct_sequence(node)], alias)
    return construct


_PresetLoader.add_constructor(
    '!PackedStringArray', _string_array('PackedStringArray'))
_PresetLoader.add_constructor(
    '!PoolStringArray', _string_array('PoolStringArray'))


def get_major_version(version: str) -> int:
    """`"4.2.1"` -> `4`. Raises `ValueError` on unsupported versions."""
    if (m := _VERSION.match(version)) is None:
        raise ValueError(f'Invalid Godot version: "{version}"')
    major = int(m.group(1))
    if major not in SUPPORTED_VERSIONS:
        raise ValueError(
            f'Unsupported Godot major version {major}, '
            f'expected one of {SUPPORTED_VERSIONS}')
    return major


def _template_path(platform: str, major: int) -> str:
    return join(_DATA_DIR, f'{platform.lower()}_v{major}.yaml')


def has_base_preset(platform: str, major: int) -> bool:
    return major in SUPPORTED_VERSIONS \
        and platform in ('Android', 'iOS') \
        and exists(_template_path(platform, major))


@lru_cache
def _load_template(platform: str, major: int) -> ExportPreset:
    with open(_template_path(platform, major), 'r', encoding='utf-8') as fp:
        return yaml.load(fp, _PresetLoader)


def get_base_preset(platform: Platform, major: GodotMajorVersion) -> ExportPreset:
    """A fresh copy every call, feel free to edit it."""
    if not has_base_preset(platform, major):
        raise ValueError(
            f'No base preset for platform "{platform}" (Godot {major})')
    return deepcopy(_load_template(platform, major))


def get_base_preset_android_v3() -> ExportPreset:
    return get_base_preset('Android', 3)


def get_base_preset_android_v4() -> ExportPreset:
    return get_base_preset('Android', 4)


def get_base_preset_ios_v3() -> ExportPreset:
    return get_base_preset('iOS', 3)


def get_base_preset_ios_v4() -> ExportPreset:
    return get_base_preset('iOS', 4)
