# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/14 19:21:36
# @Author : Kariko Lin

from dataclasses import dataclass, field
from typing import Any, Required, TypeAlias, TypedDict

PRESET_SECTION_PREFIX = 'preset.'
OPTIONS_SECTION_SUFFIX = '.options'
OPTIONS_KEY = 'options'

# flat, leaf scalars only.
PresetOptions: TypeAlias = dict[str, Any]


# see `export_presets.cfg`. Godot adds fields every minor release,
# so any other key is still welcome in runtime.
class ExportPreset(TypedDict, total=False):
    name: Required[str]
    platform: Required[str]
    runnable: Required[bool]
    dedicated_server: bool
    custom_features: str
    export_filter: str
    include_filter: str
    exclude_filter: str
    export_path: str
    encryption_include_filters: str
    encryption_exclude_filters: str
    encrypt_pck: bool
    encrypt_directory: bool
    script_export_mode: int
    options: PresetOptions


@dataclass
class ExportPresetsFile:
    """Presets in file order, `presets[N]` is written as `[preset.N]`."""
    presets: list[ExportPreset] = field(default_factory=list)
