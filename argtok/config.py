"""Configuration classes for argtok."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class OutputFormat(Enum):
    """Output format options"""
    SINGLE_FILE = "file"
    DIRECTORY = "directory"


@dataclass
class Fragment:
    """One weighted kind of argument the fuzzer can emit"""
    kind: str
    weight: float = 1.0
    pattern: Optional[str] = None


@dataclass
class FuzzConfig:
    """Configuration for the corpus generation process"""
    num_generations: int = 100
    malformed_ratio: float = 0.0  # 0.0 = all well-formed, 1.0 = all malformed
    output_format: OutputFormat = OutputFormat.SINGLE_FILE
    output_path: Path = Path("corpus.txt")
    seed: Optional[int] = None
    check: bool = False
    verbose: bool = False
