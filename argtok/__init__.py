"""
argtok - POSIX/GNU Argument Tokenizer

A single-pass tokenizer that classifies command-line arguments as keys,
values or the STDIN/STDOUT marker, plus a corpus fuzzer to exercise it.
"""

from .config import (
    FuzzConfig,
    Fragment,
    OutputFormat,
)
from .models import Token, TokenType
from .errors import MalformedArguments
from .tokenizer import Tokenizer
from .scanner import Scanner, ScanEvent, ScanReport, ScanResult
from .schema import ProfileValidator
from .values import FragmentGenerator
from .generator import ArgvGenerator
from .mutator import Mutator
from .writer import CorpusWriter
from .fuzzer import FuzzGenerator, FuzzStats


__version__ = '1.0.0'

__all__ = [
    # Main entry points
    'Tokenizer',
    'Scanner',
    'FuzzGenerator',

    # Tokens and errors
    'Token',
    'TokenType',
    'MalformedArguments',

    # Configuration
    'FuzzConfig',
    'OutputFormat',
    'Fragment',

    # Results
    'ScanEvent',
    'ScanResult',
    'ScanReport',
    'FuzzStats',

    # Components
    'ProfileValidator',
    'FragmentGenerator',
    'ArgvGenerator',
    'Mutator',
    'CorpusWriter',
]
