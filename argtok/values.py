"""Text generation for the different argument fragments."""

import random
import re
from typing import Optional

import rstr

from .config import Fragment


DEFAULT_PATTERNS = {
    'value': r'[a-z0-9_./]{1,10}',
    'short': r'[a-zA-Z]',
    'bundle': r'[a-zA-Z]{2,5}',
    'long': r'[a-z]{2,10}',
}


class FragmentGenerator:
    """Renders fragments as raw argument strings.

    Pattern text comes from ``rstr.xeger`` driven by the shared random
    generator, so a seed reproduces the whole corpus.
    """

    def __init__(self, rng: random.Random, attached_probability: float = 0.0,
                 value_pattern: Optional[str] = None):
        self.rng = rng
        self.attached_probability = attached_probability
        self.value_pattern = value_pattern or DEFAULT_PATTERNS['value']
        self._rstr = rstr.Rstr(rng)

    def generate(self, fragment: Fragment) -> str:
        """Generate one argument for a fragment."""
        kind = fragment.kind

        if kind == 'end':
            return '--'
        if kind == 'io':
            return '-'

        if kind not in DEFAULT_PATTERNS:
            raise ValueError(f"Unknown fragment kind '{kind}'")

        text = self.xeger(fragment.pattern or DEFAULT_PATTERNS[kind])

        if kind == 'value':
            return text

        prefix = '--' if kind == 'long' else '-'
        arg = prefix + text
        if self.rng.random() < self.attached_probability:
            arg = f"{arg}={self.attached_value()}"
        return arg

    def attached_value(self) -> str:
        return self.xeger(self.value_pattern)

    def xeger(self, pattern: str) -> str:
        try:
            return self._rstr.xeger(pattern)
        except re.error as e:
            raise ValueError(f"Cannot generate text for pattern '{pattern}': {e}")
