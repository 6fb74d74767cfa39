# -*- encoding: utf-8 -*-
# @File   : operations.py
# @Time   : 2026/10/14 23:17:50
# @Author : Kariko Lin

"""List style accessors. Writers return a new `ExportPresetsFile`,
leaving the given one untouched."""

from .model import ExportPreset, ExportPresetsFile

__all__ = ['get_preset', 'find_preset', 'set_preset', 'remove_preset']


def get_preset(
    presets: ExportPresetsFile, index: int
) -> ExportPreset | None:
    if not 0 <= index < len(presets.presets):
        return None
    return presets.presets[index]


def _same(lhs: object, rhs: str) -> bool:
    return str(lhs or '').strip().upper() == rhs.strip().upper()


def find_preset(
    presets: ExportPresetsFile, *,
    name: str | None = None,
    platform: str | None = None,
    index: int | None = None
) -> ExportPreset | None:
    """First preset matching `platform` or `name`
    (trimmed, case insensitive). `index` overrides both."""
    if index is not None:
        return get_preset(presets, index)

    for i in presets.presets:
        if platform and _same(i.get('platform'), platform):
            return i
        if name and _same(i.get('name'), name):
            return i
    return None


def set_preset(
    presets: ExportPresetsFile,
    preset: ExportPreset,
    index: int | None = None
) -> ExportPresetsFile:
    """Replace the preset at `index`, or append if `index` isn't valid."""
    ret = list(presets.presets)
    if index is not None and 0 <= index < len(ret):
        ret[index] = preset
    else:
        ret.append(preset)
    return ExportPresetsFile(ret)


def remove_preset(
    presets: ExportPresetsFile, index: int
) -> ExportPresetsFile:
    if not 0 <= index < len(presets.presets):
        return presets
    ret = list(presets.presets)
    del ret[index]
    return ExportPresetsFile(ret)
