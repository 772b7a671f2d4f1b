"""Canonical renaming of identifiers by first occurrence."""

from __future__ import annotations

from .ast import App, Lam, Term, Var


def _index(name: str, mapping: dict[str, int]) -> str:
    if name not in mapping:
        mapping[name] = len(mapping)
    return str(mapping[name])


def reify(term: Term) -> Term:
    """Rename every identifier in ``term`` to a dense numeric string.

    Names are numbered in the order they are first met during a depth-first,
    left-to-right walk. One mapping is shared by the whole walk, so free and
    bound names draw from the same numbering.

    A binder is numbered after its body has been walked. A binder whose name
    never occurs in its body (``λx.y``) gets the next free index at that point,
    so ``reify(λx.y) == λ1.0``.
    """

    mapping: dict[str, int] = {}

    def go(t: Term) -> Term:
        match t:
            case Var(name):
                return Var(_index(name, mapping))
            case Lam(name, body):
                body1 = go(body)
                return Lam(_index(name, mapping), body1)
            case App(left, right):
                left1 = go(left)
                return App(left1, go(right))

        raise TypeError(f"Unexpected term in reify: {t!r}")

    return go(term)


__all__ = ["reify"]
