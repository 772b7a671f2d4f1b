"""Abstract syntax tree nodes for the untyped lambda calculus."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """Base class for all lambda terms."""

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from .pretty import to_text

        return to_text(self)


@dataclass(frozen=True)
class Var(Term):
    """Variable referring to ``name``.

    Args:
        name: Opaque identifier. It is free or bound depending on the
            enclosing ``Lam`` nodes.
    """

    name: str


@dataclass(frozen=True)
class Lam(Term):
    """Abstraction ``λname.body``.

    Args:
        name: Name bound inside ``body``.
        body: Term in which ``name`` is in scope.
    """

    name: str
    body: Term


@dataclass(frozen=True)
class App(Term):
    """Function application ``(left right)``.

    Args:
        left: Term in function position.
        right: Argument supplied to ``left``.
    """

    left: Term
    right: Term


def variable(name: str) -> Var:
    return Var(name)


def abstraction(name: str, body: Term) -> Lam:
    return Lam(name, body)


def application(left: Term, right: Term) -> App:
    return App(left, right)


__all__ = [
    "Term",
    "Var",
    "Lam",
    "App",
    "variable",
    "abstraction",
    "application",
]
