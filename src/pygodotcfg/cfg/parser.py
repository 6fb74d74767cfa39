# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 01:30:55
# @Author : Kariko Lin

"""Recursive descent parser over `lexer.next_token()`.

Inside the parser, any syntax error is a raised `ParseError`,
`parse_document()` is the boundary turning it into a returned value
alongside the partially built document.
"""

import logging
from io import TextIOBase
from typing import Callable, NamedTuple, TypeVar

from ..abstract import FileHandler
from .consts import (
    COLOR_CONSTRUCTOR,
    NUMERIC_SENTINELS,
    OBJECT_CONSTRUCTOR,
    STRING_ARRAY_CONSTRUCTORS,
    VECTOR2_CONSTRUCTOR,
    TokenKind,
)
from .lexer import CharStream, ParseError, Token, next_token
from .model import ClassObject, Color, ConfigFile, PackedStringArray, \
    Value, Vector2
from .writer import serialize_document

__all__ = [
    'ParseError', 'ParseResult',
    'parse_value', 'parse_document', 'ConfigFileParser'
]


class ParseResult(NamedTuple):
    document: ConfigFile
    error: ParseError | None = None


def _expect(stream: CharStream, kind: TokenKind, what: str) -> Token:
    token = next_token(stream)
    if token.kind is not kind:
        raise ParseError(f"Expected {what}", token.line)
    return token


T = TypeVar('T')


def _parse_list(
    stream: CharStream,
    closer: TokenKind,
    parse_item: Callable[[CharStream, Token], T],
    token: Token | None = None,
) -> list[T]:
    """Comma separated items up to `closer`, which is consumed.

    An immediate closer means an empty list;
    a comma must always be followed by another item.
    """
    ret: list[T] = []
    if token is None:
        token = next_token(stream)
    if token.kind is closer:
        return ret
    while True:
        ret.append(parse_item(stream, token))
        token = next_token(stream)
        if token.kind is closer:
            return ret
        if token.kind is not TokenKind.COMMA:
            raise ParseError(
                f"Expected ',' or '{closer.value}'", token.line)
        token = next_token(stream)
        if token.kind is closer:
            raise ParseError(
                f"Trailing ',' before '{closer.value}'", token.line)


def _parse_number_arg(stream: CharStream, token: Token) -> float:
    if token.kind is TokenKind.NUMBER:
        return token.value
    if token.kind is TokenKind.IDENTIFIER and token.value in NUMERIC_SENTINELS:
        return NUMERIC_SENTINELS[token.value]
    raise ParseError(
        f'Expected number in constructor, got {token.value!r}', token.line)


def _parse_string_arg(stream: CharStream, token: Token) -> str:
    if token.kind is not TokenKind.STRING:
        raise ParseError(
            f'Expected string in string array, got {token.value!r}',
            token.line)
    return token.value


def _parse_pair(stream: CharStream, token: Token) -> tuple[str, Value]:
    if token.kind is not TokenKind.STRING:
        raise ParseError(
            f'Expected string as dictionary key, got {token.value!r}',
            token.line)
    _expect(stream, TokenKind.COLON, "':' after dictionary key")
    return token.value, parse_value(stream)


def _parse_numbers(stream: CharStream, name: str, arity: int) -> list[float]:
    line = _expect(stream, TokenKind.PARENTHESIS_OPEN, f"'(' after {name}").line
    args = _parse_list(stream, TokenKind.PARENTHESIS_CLOSE, _parse_number_arg)
    if len(args) != arity:
        raise ParseError(
            f'Expected {arity} arguments for {name} constructor, '
            f'got {len(args)}', line)
    return args


def _parse_object(stream: CharStream) -> ClassObject:
    _expect(stream, TokenKind.PARENTHESIS_OPEN, f"'(' after {OBJECT_CONSTRUCTOR}")
    class_name = _expect(stream, TokenKind.IDENTIFIER, 'class name in Object')
    ret = ClassObject(class_name.value)
    token = next_token(stream)
    if token.kind is TokenKind.PARENTHESIS_CLOSE:
        return ret
    if token.kind is not TokenKind.COMMA:
        raise ParseError("Expected ',' or ')' in Object", token.line)
    token = next_token(stream)
    if token.kind is TokenKind.PARENTHESIS_CLOSE:
        raise ParseError("Trailing ',' before ')'", token.line)
    ret.update(_parse_list(
        stream, TokenKind.PARENTHESIS_CLOSE, _parse_pair, token))
    return ret


def _parse_construct(stream: CharStream, token: Token) -> Value:
    ident: str = token.value
    match ident:
        case 'null':
            return None
        case _ if ident in NUMERIC_SENTINELS:
            return NUMERIC_SENTINELS[ident]
        case 'Color':
            return Color(*_parse_numbers(stream, COLOR_CONSTRUCTOR, 4))
        case 'Vector2':
            return Vector2(*_parse_numbers(stream, VECTOR2_CONSTRUCTOR, 2))
        case _ if ident in STRING_ARRAY_CONSTRUCTORS:
            _expect(stream, TokenKind.PARENTHESIS_OPEN, f"'(' after {ident}")
            return PackedStringArray(
                _parse_list(
                    stream, TokenKind.PARENTHESIS_CLOSE, _parse_string_arg),
                alias=ident)
        case 'Object':
            return _parse_object(stream)
    raise ParseError(f'Unknown identifier: {ident}', token.line)


def parse_value(stream: CharStream, token: Token | None = None) -> Value:
    """Parse one value, usually right after the `=` of a key.

    Pass `token` if its first token has already been consumed.
    """
    if token is None:
        token = next_token(stream)
    match token.kind:
        case TokenKind.STRING | TokenKind.NUMBER | TokenKind.BOOLEAN:
            return token.value
        case TokenKind.IDENTIFIER:
            return _parse_construct(stream, token)
        case TokenKind.BRACKET_OPEN:
            return _parse_list(
                stream, TokenKind.BRACKET_CLOSE, parse_value)
        case TokenKind.BRACE_OPEN:
            return dict(_parse_list(
                stream, TokenKind.BRACE_CLOSE, _parse_pair))
        case TokenKind.EOF:
            raise ParseError('Unexpected end of input, expected value',
                             token.line)
    raise ParseError(f"Unexpected '{token.value}', expected value",
                     token.line)


def _read_section_name(stream: CharStream, line: int) -> str:
    # read raw, section names may hold chars an identifier can't.
    buf: list[str] = []
    while True:
        c = stream.get_char()
        if not c or c == '\n':
            raise ParseError("Expected ']' after section name", line)
        if c == '\\' and stream.peek_char() == ']':
            buf.append(stream.get_char())
        elif c == ']':
            break
        else:
            buf.append(c)
    if not (name := ''.join(buf).strip()):
        raise ParseError('Expected section name', line)
    return name


def _parse_key(token: Token) -> str:
    match token.kind:
        case TokenKind.IDENTIFIER | TokenKind.STRING:
            return token.value
        case TokenKind.BOOLEAN:
            return 'true' if token.value else 'false'
        case TokenKind.BRACKET_CLOSE:
            raise ParseError("Unexpected ']'", token.line)
    raise ParseError(
        f"Unexpected '{token.value}', expected key or section",
        token.line)


def parse_document(text: str) -> ParseResult:
    """Parse a whole config text.

    Never raises for malformed input: `ParseResult.error` carries the
    `ParseError`, and `ParseResult.document` what was parsed before it.
    """
    document = ConfigFile()
    stream = CharStream(text)
    section = ''
    try:
        while (token := next_token(stream)).kind is not TokenKind.EOF:
            if token.kind is TokenKind.BRACKET_OPEN:
                section = _read_section_name(stream, token.line)
                document.add_section(section)
                continue
            key = _parse_key(token)
            _expect(stream, TokenKind.EQUAL, "'=' after key")
            value = parse_value(stream)
            if document.has_section_key(section, key):
                logging.debug(
                    f'duplicate key "{key}" in [{section}] '
                    f'at line {token.line}, last one wins.')
            document.set_value(section, key, value)
    except ParseError as e:
        logging.debug(f'config parsing stopped: {e}')
        return ParseResult(document, e)
    return ParseResult(document)


class ConfigFileParser(FileHandler[ConfigFile]):
    """Godot config files on disk, such as `project.godot`."""

    @staticmethod
    def readstream(buf: TextIOBase) -> ParseResult:
        """Parse an already decoded text stream.

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return parse_document(buf.read())

    def read(self) -> ConfigFile:
        """Read and parse the file, raising `ParseError` if malformed."""
        document, error = self.readstream(self._open_text())
        if error is not None:
            logging.warning(f'{self._fn}: {error}')
            raise error
        return document

    def write(self, instance: ConfigFile) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8',
                  newline='\n') as fp:
            fp.write(serialize_document(instance))
        logging.info(f'{len(instance)} sections written to {self._fn}')

    def __str__(self) -> str:
        return f"Godot config: {super().__str__()} ({self._codec})"
