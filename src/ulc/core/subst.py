"""Substitution of terms for named variables.

Capture is avoided conservatively: when the binder of an abstraction occurs
free in the replacement, the whole abstraction is left untouched instead of
being alpha-renamed. ``[x -> z](λz.x)`` therefore stays ``λz.x``. This is a
known limitation; it is not textbook capture-avoiding substitution, which
would rename the binder and produce ``λz'.z``.
"""

from __future__ import annotations

from .ast import App, Lam, Term, Var
from .free_vars import free_variables


def substitute(term: Term, name: str, replacement: Term) -> Term:
    """Replace the free occurrences of ``name`` in ``term`` with ``replacement``.

    Untouched subterms are shared with ``term`` rather than copied.
    """

    match term:
        case Var(var_name):
            return replacement if var_name == name else term
        case Lam(bound, body):
            if bound == name:
                return term
            # [x->s](λy.t) = λy.[x->s]t  only if y ∉ FV(s)
            if bound in free_variables(replacement):
                return term
            return Lam(bound, substitute(body, name, replacement))
        case App(left, right):
            return App(
                substitute(left, name, replacement),
                substitute(right, name, replacement),
            )

    raise TypeError(f"Unexpected term in substitute: {term!r}")


__all__ = ["substitute"]
