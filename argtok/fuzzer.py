"""Main corpus generator orchestrator."""

import random
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import FuzzConfig
from .errors import MalformedArguments
from .generator import ArgvGenerator
from .mutator import Mutator
from .scanner import Scanner
from .schema import DEFAULT_PROFILE_PATH, ProfileValidator
from .writer import CorpusWriter


@dataclass
class FuzzStats:
    """Counts collected while generating a corpus"""
    total: int = 0
    well_formed: int = 0
    malformed: int = 0
    mismatches: int = 0


class FuzzGenerator:
    """Main corpus generator orchestrator."""

    def __init__(self, profile_path: Optional[Path], fuzz_config: FuzzConfig):
        self.profile_path = profile_path or DEFAULT_PROFILE_PATH
        self.fuzz_config = fuzz_config
        self.rng = random.Random(fuzz_config.seed)
        self.verbose = fuzz_config.verbose

        # Pipeline components (initialized in run())
        self.validator = ProfileValidator()
        self.profile = None
        self.generator = None
        self.mutator = None
        self.writer = None
        self.scanner = Scanner()

    def run(self) -> FuzzStats:
        """Run the complete generation pipeline."""
        self._log("[1/4] Loading and validating profile...")
        self.profile = self.validator.validate(self.profile_path)
        name = self.profile.get('metadata', {}).get('name', self.profile_path.stem)
        self._log(f"      Profile: {name}")
        self._log(f"      Fragments: {len(self.profile['fragments'])}")

        self._log("[2/4] Initializing generator and mutator...")
        self.generator = ArgvGenerator(self.profile, self.rng)
        self.mutator = Mutator(self.generator.fragment_generator, self.rng)

        self._log("[3/4] Initializing corpus writer...")
        self.writer = CorpusWriter(self.fuzz_config.output_path, self.fuzz_config.output_format)
        self.writer.initialize()

        self._log("[4/4] Generating test cases...")
        self._log(f"      Target: {self.fuzz_config.num_generations} generations")
        self._log(f"      Malformed ratio: {self.fuzz_config.malformed_ratio:.1%}")

        try:
            stats = self._generate_all()
        finally:
            total = self.writer.finalize()
        stats.total = total

        self._log(f"\nGeneration complete!")
        self._log(f"  Total: {stats.total} test cases")
        self._log(f"  Well-formed: {stats.well_formed}")
        self._log(f"  Malformed: {stats.malformed}")
        if self.fuzz_config.check:
            self._log(f"  Mismatches: {stats.mismatches}")
        self._log(f"  Output: {self.fuzz_config.output_path}")
        self._log(f"  Format: {self.fuzz_config.output_format.value}")

        return stats

    def _generate_all(self) -> FuzzStats:
        """Generate all test cases."""
        stats = FuzzStats()

        for gen_idx in range(self.fuzz_config.num_generations):
            should_be_malformed = self.rng.random() < self.fuzz_config.malformed_ratio

            args = self.generator.generate()
            args = self.mutator.mutate(args, should_be_malformed)

            if self.fuzz_config.check and not self._agrees(args, should_be_malformed):
                stats.mismatches += 1
                self._log(f"      Mismatch in case {gen_idx}: {args}")

            self.writer.write(args, should_be_malformed)

            if should_be_malformed:
                stats.malformed += 1
            else:
                stats.well_formed += 1

            if self.verbose and (gen_idx + 1) % 10 == 0:
                print(f"      Progress: {gen_idx + 1}/{self.fuzz_config.num_generations}", end='\r')

        return stats

    def _agrees(self, args: List[str], expect_malformed: bool) -> bool:
        """Check the tokenizer accepts or rejects a case as intended."""
        try:
            self.scanner.scan(args)
        except MalformedArguments:
            return expect_malformed
        return not expect_malformed

    def _log(self, message: str) -> None:
        """Log message if verbose mode is enabled."""
        if self.verbose:
            print(message)
