"""Free-variable analysis for lambda terms."""

from __future__ import annotations

from .ast import App, Lam, Term, Var


def free_variables(term: Term) -> frozenset[str]:
    """Return the names occurring free in ``term``."""

    match term:
        case Var(name):
            return frozenset((name,))
        case Lam(name, body):
            return free_variables(body) - {name}
        case App(left, right):
            return free_variables(left) | free_variables(right)

    raise TypeError(f"Unexpected term in free_variables: {term!r}")


__all__ = ["free_variables"]
