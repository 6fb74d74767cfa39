# -*- encoding: utf-8 -*-
# @File   : merge.py
# @Time   : 2026/10/14 22:40:08
# @Author : Kariko Lin

from typing import Any, Mapping

from .model import OPTIONS_KEY, ExportPreset, PresetOptions

__all__ = ['merge_presets', 'merge_options']


def _is_plain_mapping(value: Any) -> bool:
    # `ClassObject` is a dict too, but an atom to merging.
    return type(value) is dict


def _deep_merge(
    target: Mapping[str, Any], source: Mapping[str, Any]
) -> dict[str, Any]:
    ret = dict(target)
    for k, v in source.items():
        if k != OPTIONS_KEY and _is_plain_mapping(ret.get(k)) \
                and _is_plain_mapping(v):
            ret[k] = _deep_merge(ret[k], v)
        else:
            ret[k] = v
    return ret


def merge_options(*options: Mapping[str, Any]) -> PresetOptions:
    """Flat overlay, later keys replace earlier ones, no recursion."""
    ret: PresetOptions = {}
    for i in options:
        ret.update(i)
    return ret


def merge_presets(*presets: ExportPreset) -> ExportPreset:
    """Fold `presets` left to right, later values win.

    Fields other than `options` are deep merged (nested plain dicts
    key by key), while `options` is merged by `merge_options()`.

    Only the top level dict and `options` of the result are new objects,
    nested values may still be shared with the inputs.
    """
    if not presets:
        raise ValueError('At least one preset required for merging')

    first, *rest = presets
    ret: dict[str, Any] = dict(first)
    if (options := first.get(OPTIONS_KEY)) is not None:
        ret[OPTIONS_KEY] = dict(options)

    for i in rest:
        fields = {k: v for k, v in i.items() if k != OPTIONS_KEY}
        ret = _deep_merge(ret, fields)
        ret[OPTIONS_KEY] = merge_options(
            ret.get(OPTIONS_KEY) or {}, i.get(OPTIONS_KEY) or {})
    return ExportPreset(**ret)
