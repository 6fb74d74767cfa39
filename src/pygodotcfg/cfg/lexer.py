# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2026/10/13 00:12:47
# @Author : Kariko Lin

"""Tokenizer of Godot's text config format (a `VariantParser` subset).

Comments (`;` or `#` to end of line) and whitespaces never reach
the token stream.
"""

from typing import Any, NamedTuple

from .consts import (
    COMMENT_MARKS,
    DIGITS,
    IDENTIFIER_BODY,
    IDENTIFIER_HEAD,
    SINGLE_CHAR_TOKENS,
    STRING_CLOSERS,
    STRING_ESCAPES,
    WHITESPACES,
    TokenKind,
)


class ParseError(Exception):
    """Malformed config text, raised with the 1-based line number."""

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f'Parse error at line {line}: {message}')
        self.message = message
        self.line = line


class Token(NamedTuple):
    kind: TokenKind
    value: Any
    line: int


class CharStream:
    """Character cursor with one char of pushback.

    `get_char()` returns `''` at EOF.
    """

    def __init__(self, content: str) -> None:
        self._content = content
        self._pos = 0
        self.line = 1

    def get_char(self) -> str:
        if self._pos >= len(self._content):
            return ''
        c = self._content[self._pos]
        self._pos += 1
        if c == '\n':
            self.line += 1
        return c

    def peek_char(self) -> str:
        if self._pos >= len(self._content):
            return ''
        return self._content[self._pos]

    def save_char(self, c: str) -> None:
        """Push back the char just read. EOF (`''`) is a no-op."""
        if not c:
            return
        self._pos -= 1
        if c == '\n':
            self.line -= 1

    def is_eof(self) -> bool:
        return self._pos >= len(self._content)


def _skip_comment(stream: CharStream) -> None:
    while (c := stream.get_char()) and c != '\n':
        pass


def _read_string(stream: CharStream, line: int) -> str:
    ret: list[str] = []
    while True:
        c = stream.get_char()
        if not c:
            raise ParseError('Unterminated string', line)
        if c == '\\':
            c = stream.get_char()
            if not c:
                raise ParseError('Unterminated string', line)
            ret.append(STRING_ESCAPES.get(c, c))
        elif c == '"':
            # `"a=b"=7` and the like: only a quote followed by
            # a delimiter ends the string, others are content.
            if stream.peek_char() in STRING_CLOSERS:
                return ''.join(ret)
            ret.append(c)
        else:
            # raw newlines kept, that's how multi-line strings are stored.
            ret.append(c)


def _read_digits(stream: CharStream, buf: list[str]) -> int:
    cnt = 0
    while (c := stream.get_char()) in DIGITS:
        buf.append(c)
        cnt += 1
    stream.save_char(c)
    return cnt


def _read_number(stream: CharStream, first: str, line: int) -> float:
    buf = [first]
    has_dot = first == '.'
    while True:
        c = stream.get_char()
        if c in DIGITS:
            buf.append(c)
        elif c == '.' and not has_dot:
            has_dot = True
            buf.append(c)
        else:
            break

    if c in ('e', 'E'):
        buf.append(c)
        if (sign := stream.get_char()) in ('+', '-'):
            buf.append(sign)
        else:
            stream.save_char(sign)
        if not _read_digits(stream, buf):
            raise ParseError(f'Malformed number: {"".join(buf)}', line)
    else:
        stream.save_char(c)

    try:
        return float(''.join(buf))
    except ValueError:
        raise ParseError(f'Malformed number: {"".join(buf)}', line) from None


def _read_identifier(stream: CharStream, first: str) -> str:
    buf = [first]
    while (c := stream.get_char()) in IDENTIFIER_BODY:
        buf.append(c)
    stream.save_char(c)
    return ''.join(buf)


def next_token(stream: CharStream) -> Token:
    """Read the next meaningful token from `stream`."""
    while True:
        c = stream.get_char()
        if c in WHITESPACES:
            continue
        if c in COMMENT_MARKS:
            _skip_comment(stream)
            continue
        break

    line = stream.line
    if not c:
        return Token(TokenKind.EOF, None, line)
    if c in SINGLE_CHAR_TOKENS:
        return Token(SINGLE_CHAR_TOKENS[c], c, line)
    if c == '"':
        return Token(TokenKind.STRING, _read_string(stream, line), line)

    peek = stream.peek_char()
    if c in DIGITS or (c in '+-.' and peek in DIGITS):
        return Token(TokenKind.NUMBER, _read_number(stream, c, line), line)
    if c in IDENTIFIER_HEAD or (c in '+-' and peek in IDENTIFIER_HEAD):
        ident = _read_identifier(stream, c)
        match ident:
            case 'true':
                return Token(TokenKind.BOOLEAN, True, line)
            case 'false':
                return Token(TokenKind.BOOLEAN, False, line)
        return Token(TokenKind.IDENTIFIER, ident, line)

    raise ParseError(f'Unexpected character: {c!r}', line)
