"""Mutation strategies for generating malformed argument vectors."""

import random
from typing import List

from .values import FragmentGenerator


class Mutator:
    """Mutates well-formed vectors into ones the tokenizer must reject."""

    # Characters usable as a one-character long key
    KEY_CHARS = 'abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_'

    def __init__(self, fragment_generator: FragmentGenerator, rng: random.Random):
        self.fragment_generator = fragment_generator
        self.rng = rng

    def mutate(self, args: List[str], target_malformed: bool) -> List[str]:
        """Mutate argument list if targeting malformed output."""
        if not target_malformed:
            return args

        strategies = [
            self._argument_after_io,
            self._short_long_key,
            self._attached_io,
        ]

        strategy = self.rng.choice(strategies)
        return strategy(args.copy())

    def _argument_after_io(self, args: List[str]) -> List[str]:
        """Insert a lone "-" that is followed by another argument."""
        if args and args[-1] == '-':
            args.pop()
        if not args:
            args.append(self.fragment_generator.attached_value())
        args.insert(self.rng.randint(0, len(args) - 1), '-')
        return args

    def _short_long_key(self, args: List[str]) -> List[str]:
        """Insert a double-hyphen key of one character ("--x")."""
        key = '--' + self.rng.choice(self.KEY_CHARS)
        if self.rng.random() < 0.5:
            key = f"{key}={self.fragment_generator.attached_value()}"
        args.insert(self.rng.randint(0, self._keys_end(args)), key)
        return args

    def _attached_io(self, args: List[str]) -> List[str]:
        """Attach a lone "-" as a value ("--key=-") ahead of more arguments."""
        if args and args[-1] == '-':
            args.pop()
        if not args:
            args.append(self.fragment_generator.attached_value())
        key = '--' + self.fragment_generator.xeger(r'[a-z]{2,8}')
        end = min(self._keys_end(args), len(args) - 1)
        args.insert(self.rng.randint(0, end), f"{key}=-")
        return args

    def _keys_end(self, args: List[str]) -> int:
        """Index of the first "--" marker, past which keys are plain values."""
        return args.index('--') if '--' in args else len(args)
