"""Minimal textual rendering of lambda terms."""

from __future__ import annotations

from .ast import App, Lam, Term, Var


def to_text(term: Term) -> str:
    """Return the textual form of ``term``.

    Grammar::

        Var := name
        Lam := "λ" name "." to_text(body)
        App := "(" to_text(left) " " to_text(right) ")"
    """

    match term:
        case Var(name):
            return name
        case Lam(name, body):
            return f"λ{name}.{to_text(body)}"
        case App(left, right):
            return f"({to_text(left)} {to_text(right)})"

    raise TypeError(f"Cannot render unknown term: {term!r}")


__all__ = ["to_text"]
