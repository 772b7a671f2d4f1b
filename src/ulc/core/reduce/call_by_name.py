"""Single-step call-by-name reduction."""

from __future__ import annotations

import logging

from ..ast import App, Lam, Term, Var
from .beta import beta_contract

logger = logging.getLogger(__name__)


def call_by_name_reduce(term: Term) -> Term:
    """Reduce the outermost redex of ``term`` once.

    Abstractions are values and are never entered. An application whose head
    is not an abstraction raises ``ReductionError``.
    """

    match term:
        case Var() | Lam():
            return term
        case App():
            logger.debug("call-by-name step: %s", term)
            return beta_contract(term)

    raise TypeError(f"Unexpected term in call_by_name_reduce: {term!r}")


__all__ = ["call_by_name_reduce"]
