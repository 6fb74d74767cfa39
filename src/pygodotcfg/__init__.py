# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 20:01:52
# @Author : Kariko Lin

import logging

from .cfg import (
    ClassObject, Color, ConfigFile, ConfigFileParser, PackedStringArray,
    ParseError, ParseResult, Vector2, parse_document, serialize_document
)
from .presets import (
    ExportPreset, ExportPresetsFile, ExportPresetsParser,
    find_preset, get_base_preset, get_preset, load_export_presets,
    merge_options, merge_presets, parse_export_presets,
    remove_preset, save_export_presets, serialize_export_presets, set_preset
)

__all__ = [
    'ClassObject', 'Color', 'ConfigFile', 'ConfigFileParser',
    'PackedStringArray', 'ParseError', 'ParseResult', 'Vector2',
    'parse_document', 'serialize_document',
    'ExportPreset', 'ExportPresetsFile', 'ExportPresetsParser',
    'find_preset', 'get_base_preset', 'get_preset', 'load_export_presets',
    'merge_options', 'merge_presets', 'parse_export_presets',
    'remove_preset', 'save_export_presets', 'serialize_export_presets',
    'set_preset'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
