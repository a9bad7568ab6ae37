"""Corpus output writing."""

import shlex
from pathlib import Path
from typing import List, Optional, TextIO

from .config import OutputFormat


class CorpusWriter:
    """Writes generated argument vectors as shell-quoted command lines.

    A single-file corpus holds one command line per line. A directory corpus
    holds one file per case, under ``well-formed/`` or ``malformed/``
    depending on the outcome the case was generated for.
    """

    SUBDIRS = {False: 'well-formed', True: 'malformed'}

    def __init__(self, output_path: Path, output_format: OutputFormat):
        self.output_path = output_path
        self.output_format = output_format
        self.case_count = 0
        self._stream: Optional[TextIO] = None

    def initialize(self) -> None:
        """Create the destination, replacing an existing corpus file."""
        if self.output_format == OutputFormat.DIRECTORY:
            for subdir in self.SUBDIRS.values():
                (self.output_path / subdir).mkdir(parents=True, exist_ok=True)
        else:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            self._stream = open(self.output_path, 'w', encoding='utf-8')

    def write(self, args: List[str], malformed: bool = False) -> None:
        """Write a single test case."""
        line = shlex.join(args) + '\n'
        try:
            if self._stream is not None:
                self._stream.write(line)
            else:
                name = f"case_{self.case_count:06d}.txt"
                case_path = self.output_path / self.SUBDIRS[malformed] / name
                case_path.write_text(line, encoding='utf-8')
        except OSError as e:
            raise IOError(f"Failed to write test case {self.case_count}: {e}")
        self.case_count += 1

    def finalize(self) -> int:
        """Close the output and return the number of cases written."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None
        return self.case_count
