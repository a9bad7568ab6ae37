"""Well-formed argument vector generation."""

import random
from typing import Any, Dict, List

from .config import Fragment
from .values import FragmentGenerator


class ArgvGenerator:
    """Generates well-formed argument vectors from a fuzzing profile."""

    def __init__(self, profile: Dict[str, Any], rng: random.Random):
        self.profile = profile
        self.rng = rng
        self.generation_params = profile.get('generation', {})
        self.fragments = self._parse_fragments()
        self.fragment_generator = FragmentGenerator(
            rng,
            attached_probability=self.generation_params.get('attached_probability', 0.0),
            value_pattern=self.generation_params.get('value_pattern'),
        )

    @property
    def min_args(self) -> int:
        return self.generation_params.get('min_args', 1)

    @property
    def max_args(self) -> int:
        return self.generation_params.get('max_args', 8)

    def _parse_fragments(self) -> List[Fragment]:
        """Parse fragments from profile"""
        return [
            Fragment(
                kind=frag_spec['kind'],
                weight=frag_spec.get('weight', 1.0),
                pattern=frag_spec.get('pattern'),
            )
            for frag_spec in self.profile['fragments']
        ]

    def generate(self) -> List[str]:
        """Generate one argument vector.

        A lone "-" is only ever placed last, since anything after it would
        make the vector malformed.
        """
        count = self.rng.randint(self.min_args, self.max_args)
        inner = [f for f in self.fragments if f.kind != 'io']

        args = []
        for idx in range(count):
            candidates = self.fragments if idx == count - 1 else inner
            if not candidates:
                break
            fragment = self._choose(candidates)
            args.append(self.fragment_generator.generate(fragment))

        return args

    def _choose(self, fragments: List[Fragment]) -> Fragment:
        weights = [f.weight for f in fragments]
        return self.rng.choices(fragments, weights=weights, k=1)[0]
