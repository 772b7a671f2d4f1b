"""Reduction error type."""

from __future__ import annotations

from dataclasses import dataclass

from ulc.core.ast import Term


@dataclass
class ReductionError(Exception):
    """Raised when a term has no beta redex at its head."""

    message: str
    term: Term

    def __str__(self) -> str:
        return f"{self.message}: {self.term}"
