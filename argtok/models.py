"""Token data models for argtok."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TokenType(Enum):
    """Classification of a token reported by the tokenizer"""
    KEY = "key"
    VALUE = "value"
    IO = "io"


@dataclass(frozen=True)
class Token:
    """A classified token. ``text`` is None for IO tokens."""
    text: Optional[str]
    kind: TokenType
