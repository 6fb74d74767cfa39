# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/12 21:05:16
# @Author : Kariko Lin

from enum import Enum
from string import ascii_letters, digits


class TokenKind(str, Enum):
    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    IDENTIFIER = 'identifier'
    BRACKET_OPEN = '['
    BRACKET_CLOSE = ']'
    PARENTHESIS_OPEN = '('
    PARENTHESIS_CLOSE = ')'
    BRACE_OPEN = '{'
    BRACE_CLOSE = '}'
    EQUAL = '='
    COMMA = ','
    COLON = ':'
    EOF = 'EOF'


SINGLE_CHAR_TOKENS = {
    k.value: k for k in (
        TokenKind.BRACKET_OPEN, TokenKind.BRACKET_CLOSE,
        TokenKind.PARENTHESIS_OPEN, TokenKind.PARENTHESIS_CLOSE,
        TokenKind.BRACE_OPEN, TokenKind.BRACE_CLOSE,
        TokenKind.EQUAL, TokenKind.COMMA, TokenKind.COLON)
}

WHITESPACES = frozenset(' \t\r\n')
COMMENT_MARKS = frozenset(';#')
DIGITS = frozenset(digits)
IDENTIFIER_HEAD = frozenset(ascii_letters + '_/')
IDENTIFIER_BODY = frozenset(ascii_letters + digits + '/._-')

# a quote only closes a string when followed by one of these ('' is EOF).
STRING_CLOSERS = WHITESPACES | COMMENT_MARKS | frozenset(
    ('', '=', ',', ')', ']', '}', ':'))

STRING_ESCAPES = {'n': '\n', 't': '\t', 'r': '\r', '\\': '\\', '"': '"'}

# keys containing these (or anything outside printable ASCII) get quoted.
KEY_RESERVED_CHARS = frozenset('=";[]')

NUMERIC_SENTINELS = {
    'inf': float('inf'),
    '+inf': float('inf'),
    '-inf': float('-inf'),
    'inf_neg': float('-inf'),  # Godot 4 spelling
    'nan': float('nan'),
}

COLOR_CONSTRUCTOR = 'Color'
VECTOR2_CONSTRUCTOR = 'Vector2'
OBJECT_CONSTRUCTOR = 'Object'
STRING_ARRAY_CONSTRUCTORS = (
    'PackedStringArray',  # Godot 4
    'PoolStringArray',    # Godot 3
    'StringArray',        # Godot 2
)

# reserved dictionary slot holding the class name of an `Object(...)`.
OBJECT_CLASS_KEY = '__class__'
