# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/13 03:02:41
# @Author : Kariko Lin

from .consts import OBJECT_CLASS_KEY, TokenKind
from .lexer import CharStream, ParseError, Token, next_token
from .model import (
    ClassObject,
    Color,
    ConfigFile,
    ConfigSection,
    PackedStringArray,
    Value,
    Vector2
)
from .parser import ConfigFileParser, ParseResult, parse_document, parse_value
from .writer import encode_key, encode_value, serialize_document
