# tokenizer.py - lexical analysis for fileshell command lines
from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass

log = logging.getLogger(__name__)


class TokenKind(enum.Enum):
    KEYWORD = "Keyword"
    FILENAME = "Filename"
    CONNECTOR = "Connector"
    END = "EndOfInput"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    def __str__(self):
        if self.kind is TokenKind.END:
            return self.kind.value
        return f"{self.kind.value}({self.text})"


KEYWORDS = frozenset({"create", "delete", "exit", "copy", "rename"})
CONNECTORS = frozenset({"to"})

# a word, or two words joined by a single dot (report.txt)
WORD_RE = re.compile(r"\b(\w+\.\w+|\w+)\b")

END_OF_INPUT = Token(TokenKind.END, "")


def classify(word: str) -> TokenKind:
    if word in KEYWORDS:
        return TokenKind.KEYWORD
    if word in CONNECTORS:
        return TokenKind.CONNECTOR
    # 'file' lands here too; the validator checks it as a literal marker
    return TokenKind.FILENAME


def tokenize(line: str) -> list[Token]:
    """Split a raw command line into classified tokens.

    Never raises. Characters outside the word pattern are skipped, and the
    result always ends with a single EndOfInput token, so ``tokenize("")``
    is ``[END_OF_INPUT]``.
    """
    tokens = [Token(classify(m.group(0)), m.group(0)) for m in WORD_RE.finditer(line or "")]
    tokens.append(END_OF_INPUT)
    log.debug("tokenized %r -> %s", line, format_tokens(tokens))
    return tokens


def format_tokens(tokens) -> str:
    return "[" + ", ".join(str(t) for t in tokens) + "]"
