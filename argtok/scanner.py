"""Drives the tokenizer over whole argument vectors and corpora."""

import shlex
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .models import TokenType
from .errors import MalformedArguments
from .tokenizer import Tokenizer


@dataclass
class ScanEvent:
    """A reported token plus the value pulled for it, if any"""
    kind: TokenType
    text: Optional[str]
    value: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'kind': self.kind.value, 'text': self.text}
        if self.kind is TokenType.KEY:
            data['value'] = self.value
        return data

    def __str__(self) -> str:
        label = self.kind.name.ljust(6)
        if self.kind is TokenType.IO:
            return f"{label}-"
        if self.kind is TokenType.KEY and self.value is not None:
            return f"{label}{self.text} = {self.value}"
        return f"{label}{self.text}"


@dataclass
class ScanResult:
    """Outcome of scanning one command line"""
    line: str
    events: List[ScanEvent] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class ScanReport:
    """Outcome of scanning a corpus"""
    results: List[ScanResult] = field(default_factory=list)

    @property
    def ok_count(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def malformed_count(self) -> int:
        return sum(1 for r in self.results if not r.ok)


class Scanner:
    """Tokenizes argument vectors, pulling values for the keys named.

    Keys in ``requires_value`` are followed by ``take_value`` (the value may
    be the next argument); keys in ``accepts_value`` by
    ``take_attached_value`` (only a value attached to the key is taken).
    Any other key takes no value.
    """

    def __init__(self, requires_value: Iterable[str] = (),
                 accepts_value: Iterable[str] = (), verbose: bool = False):
        self.requires_value = set(requires_value)
        self.accepts_value = set(accepts_value)
        self.verbose = verbose

    def scan(self, args: Iterable[str]) -> List[ScanEvent]:
        """Tokenize one argument vector.

        Raises:
            MalformedArguments: If the vector is malformed.
        """
        tokenizer = Tokenizer(args)
        events = []

        for token in tokenizer:
            event = ScanEvent(token.kind, token.text)
            if token.kind is TokenType.KEY:
                if token.text in self.requires_value:
                    event.value = tokenizer.take_value()
                elif token.text in self.accepts_value:
                    event.value = tokenizer.take_attached_value()
            self._log(f"      {event}  {list(tokenizer.remaining)}")
            events.append(event)

        return events

    def scan_line(self, line: str) -> ScanResult:
        """Tokenize one shell-quoted command line."""
        result = ScanResult(line=line)
        try:
            result.events = self.scan(shlex.split(line))
        except MalformedArguments as e:
            result.error = str(e)
        return result

    def scan_corpus(self, lines: Iterable[str]) -> ScanReport:
        """Tokenize every non-blank line of a corpus.

        Each line is an independent parse; a malformed line is recorded in
        the report and scanning carries on.

        Raises:
            ValueError: If a line is not valid shell quoting.
        """
        report = ScanReport()
        for idx, line in enumerate(lines, 1):
            line = line.rstrip('\n')
            if not line.strip():
                continue
            self._log(f"[{idx}] {line}")
            try:
                result = self.scan_line(line)
            except ValueError as e:
                raise ValueError(f"Line {idx}: cannot split command line: {e}")
            if not result.ok:
                self._log(f"      ERROR: {result.error}")
            report.results.append(result)
        return report

    def _log(self, message: str) -> None:
        """Log message if verbose mode is enabled."""
        if self.verbose:
            print(message)
