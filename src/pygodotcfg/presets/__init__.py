# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/14 19:18:05
# @Author : Kariko Lin

from .model import ExportPreset, ExportPresetsFile, PresetOptions
from .parser import (
    ExportPresetsParser,
    load_export_presets,
    parse_export_presets,
    presets_from_config,
    presets_to_config,
    save_export_presets,
    serialize_export_presets
)
from .operations import find_preset, get_preset, remove_preset, set_preset
from .merge import merge_options, merge_presets
from .base import (
    SUPPORTED_VERSIONS,
    get_base_preset,
    get_base_preset_android_v3,
    get_base_preset_android_v4,
    get_base_preset_ios_v3,
    get_base_preset_ios_v4,
    get_major_version,
    has_base_preset
)
