"""
Optional diagnostic channel for the parsers.

Parsers drop lines they do not recognise. When a caller asks for
diagnostics, each dropped line is recorded here instead of vanishing.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SkippedLine:
    line_no: int  # 1-based, within the text handed to the parser
    text: str
    reason: str


@dataclass
class ParseDiagnostics:
    """Track what a single parse consumed and what it dropped."""
    parser: str
    lines_seen: int = 0
    skipped: list[SkippedLine] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def skip(self, line_no: int, text: str, reason: str) -> None:
        self.skipped.append(SkippedLine(line_no, text, reason))

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    @property
    def coverage(self) -> float:
        """Share of non-empty lines that ended up somewhere (0.0 - 1.0)."""
        if not self.lines_seen:
            return 1.0
        used = max(0, self.lines_seen - len(self.skipped))
        return used / self.lines_seen

    def skipped_texts(self) -> list[str]:
        return [s.text for s in self.skipped]
