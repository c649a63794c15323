# validator.py - syntax analysis: match a token sequence against the command shapes
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional, Tuple

from tokenizer import TokenKind

log = logging.getLogger(__name__)


class CommandSyntaxError(ValueError):
    """Raised when a token sequence does not form a known command.

    ``reason`` describes the first point of mismatch and ``token`` is the
    offending token, or None when the sequence ran out.
    """

    def __init__(self, reason, token=None):
        super().__init__(reason)
        self.reason = reason
        self.token = token


class Slot(NamedTuple):
    kind: TokenKind
    literal: Optional[str] = None

    def accepts(self, token):
        if token is None or token.kind is not self.kind:
            return False
        return self.literal is None or token.text == self.literal

    @property
    def is_operand(self):
        return self.literal is None

    def describe(self):
        if self.kind is TokenKind.CONNECTOR:
            return f"connector '{self.literal}'"
        if self.literal is not None:
            return f"'{self.literal}' marker"
        return "filename"


class Shape(NamedTuple):
    slots: Tuple[Slot, ...]
    # exit has never rejected trailing words; strict mode overrides this
    lenient_tail: bool = False

    @property
    def arity(self):
        return sum(1 for s in self.slots if s.is_operand)


FILE_MARKER = Slot(TokenKind.FILENAME, "file")
TO = Slot(TokenKind.CONNECTOR, "to")
NAME = Slot(TokenKind.FILENAME)

COMMAND_SHAPES = {
    "create": Shape((FILE_MARKER, NAME)),
    "delete": Shape((FILE_MARKER, NAME)),
    "copy": Shape((FILE_MARKER, NAME, TO, NAME)),
    "rename": Shape((FILE_MARKER, NAME, TO, NAME)),
    "exit": Shape((), lenient_tail=True),
}


@dataclass(frozen=True)
class Command:
    kind: str
    operands: Tuple[str, ...] = ()


def usage(kind):
    """Render a shape as a usage line, e.g. ``copy file <filename> to <filename>``."""
    words = [kind]
    for slot in COMMAND_SHAPES[kind].slots:
        words.append("<filename>" if slot.is_operand else slot.literal)
    return " ".join(words)


def _token_at(tokens, pos):
    return tokens[pos] if pos < len(tokens) else None


def _found(token):
    if token is None or token.kind is TokenKind.END:
        return "end of input"
    return f"'{token.text}'"


def validate(tokens, strict=False) -> Command:
    """Check ``tokens`` against COMMAND_SHAPES and return the matched Command.

    Matching is exact and case-sensitive. Raises CommandSyntaxError at the
    first mismatch, including a sequence missing its EndOfInput sentinel.
    With ``strict`` set, shapes that normally tolerate trailing words (exit)
    reject them as well.
    """
    head = _token_at(tokens, 0)
    if head is None or head.kind is TokenKind.END:
        raise CommandSyntaxError("empty command", head)

    shape = COMMAND_SHAPES.get(head.text)
    if shape is None or head.kind is not TokenKind.KEYWORD:
        raise CommandSyntaxError(f"unknown command '{head.text}'", head)

    operands = []
    pos = 1
    for slot in shape.slots:
        token = _token_at(tokens, pos)
        if not slot.accepts(token):
            raise CommandSyntaxError(f"expected {slot.describe()}, found {_found(token)}", token)
        if slot.is_operand:
            operands.append(token.text)
        pos += 1

    if not (shape.lenient_tail and not strict):
        tail = _token_at(tokens, pos)
        if tail is None:
            raise CommandSyntaxError("token sequence is not terminated")
        if tail.kind is not TokenKind.END:
            raise CommandSyntaxError(f"unexpected '{tail.text}' after command", tail)

    command = Command(head.text, tuple(operands))
    log.debug("validated %s", command)
    return command


def is_valid(tokens, strict=False) -> bool:
    try:
        validate(tokens, strict=strict)
    except CommandSyntaxError:
        return False
    return True
