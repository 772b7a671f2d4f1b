"""The beta rule shared by every reduction strategy."""

from __future__ import annotations

import logging

from ..ast import App, Lam, Term
from ..errors import ReductionError
from ..subst import substitute

logger = logging.getLogger(__name__)


def is_redex(term: Term) -> bool:
    """Return ``True`` if ``term`` is an application of an abstraction."""

    match term:
        case App(Lam(), _):
            return True
        case _:
            return False


def beta_contract(term: App) -> Term:
    """Contract the redex at the head of ``term``.

    ``(λx.body) arg`` becomes ``[x -> arg]body``. Any other application is
    stuck, and ``ReductionError`` is raised without trying to reduce inside
    ``left`` or ``right``.
    """

    match term:
        case App(Lam(name, body), arg):
            return substitute(body, name, arg)
        case App():
            logger.debug("No redex at head of %s", term)
            raise ReductionError("cannot beta reduce", term)

    raise TypeError(f"Unexpected term in beta_contract: {term!r}")


__all__ = ["beta_contract", "is_redex"]
