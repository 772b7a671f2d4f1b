"""Single-step normal-order reduction."""

from __future__ import annotations

import logging

from ..ast import App, Lam, Term, Var
from .beta import beta_contract

logger = logging.getLogger(__name__)


def normal_order_reduce(term: Term) -> Term:
    """Reduce ``term`` once, entering abstraction bodies.

    An application is contracted at its head exactly as in call-by-name; an
    abstraction is rebuilt around the reduced body. Applications whose head is
    not an abstraction raise ``ReductionError`` rather than being searched for
    an inner redex.
    """

    match term:
        case Var():
            return term
        case Lam(name, body):
            return Lam(name, normal_order_reduce(body))
        case App():
            logger.debug("normal-order step: %s", term)
            return beta_contract(term)

    raise TypeError(f"Unexpected term in normal_order_reduce: {term!r}")


__all__ = ["normal_order_reduce"]
