# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2026/10/13 02:48:19
# @Author : Kariko Lin

"""Serialize `ConfigFile` back to text, the way Godot writes it:

```ini
[player]

name="Unnamed Player"
color=Color(0, 0.5, 1, 1)
"a=b"=7
```
"""

import math

from .consts import KEY_RESERVED_CHARS, OBJECT_CLASS_KEY
from .model import ClassObject, Color, ConfigFile, PackedStringArray, \
    Value, Vector2

__all__ = ['encode_key', 'encode_value', 'serialize_document']


def _escape(text: str) -> str:
    # newlines stay raw for multi-line strings.
    return text.replace('\\', '\\\\').replace('"', '\\"')


def _quote(text: str) -> str:
    return f'"{_escape(text)}"'


def _needs_quotes(key: str) -> bool:
    return not key or any(
        c in KEY_RESERVED_CHARS or not 33 <= ord(c) <= 126 for c in key)


def encode_key(key: str) -> str:
    return _quote(key) if _needs_quotes(key) else key


def _encode_number(value: float) -> str:
    if math.isnan(value):
        return 'nan'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if isinstance(value, int) or value.is_integer():
        return str(int(value))
    return repr(value)  # shortest text reading back to the same double


def encode_value(value: Value) -> str:
    """Text form of a single value, as it follows `key=`."""
    match value:
        case None:
            return 'null'
        case bool():
            return 'true' if value else 'false'
        case int() | float():
            return _encode_number(value)
        case str():
            return _quote(value)
        case Color(r=r, g=g, b=b, a=a):
            return 'Color(%s)' % ', '.join(map(_encode_number, (r, g, b, a)))
        case Vector2(x=x, y=y):
            return 'Vector2(%s)' % ', '.join(map(_encode_number, (x, y)))
        case PackedStringArray():
            return f'{value.alias}({", ".join(map(_quote, value))})'
        case list() | tuple():
            return f'[{", ".join(map(encode_value, value))}]'
        case ClassObject():
            props = ''.join(
                f',{_quote(k)}:{encode_value(v)}'
                for k, v in value.items() if k != OBJECT_CLASS_KEY)
            return f'Object({value.class_name}{props})'
        case dict():
            if not value:
                return '{}'
            pairs = ',\n'.join(
                f'{_quote(k)}: {encode_value(v)}'
                for k, v in value.items())
            return '{\n' + pairs + '\n}'
    raise TypeError(f'unable to encode {type(value).__name__}: {value!r}')


def _section_lines(name: str, pairs: dict[str, Value]) -> list[str]:
    ret = []
    if name:
        ret.append('[%s]' % name.replace(']', '\\]'))
        ret.append('')
    for k, v in pairs.items():
        ret.append(f'{encode_key(k)}={encode_value(v)}')
    return ret


def serialize_document(document: ConfigFile) -> str:
    """Whole document as text, ending with exactly one newline.

    Section-less pairs always come first,
    otherwise they would be read back into the previous section.
    """
    blocks: list[list[str]] = []
    if document.has_section('') and len(document['']) > 0:
        blocks.append(_section_lines('', document[''].to_dict()))
    for name in document:
        if name:
            blocks.append(_section_lines(name, document[name].to_dict()))

    lines: list[str] = []
    for i in blocks:
        if lines:
            lines.append('')
        lines.extend(i)
    while lines and not lines[-1]:
        lines.pop()
    return '\n'.join(lines) + '\n'
