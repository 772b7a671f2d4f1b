from __future__ import annotations

from ulc.core.ast import App, Lam, Term


def apply_term(term: Term, *args: Term) -> Term:
    """Apply ``args`` to ``term`` left-associatively.

    Args:
        term: Function being applied.
        *args: Arguments to apply, ordered left-to-right.

    Returns:
        The left-associated application ``(((term arg0) arg1) ...)``.
    """
    #  e.g. term = λx.λy.x, args = [a, b] gives ((λx.λy.x a) b)
    result: Term = term
    for arg in args:
        result = App(result, arg)
    return result


def nested_lam(*names: str, body: Term) -> Term:
    """Build a right-nested abstraction chain over ``names`` ending in ``body``.

    The first name binds outermost and the last name binds closest to
    ``body``, matching the left-to-right order of binders in ``λx.λy.body``.

    Args:
        *names: Bound names, ordered from outermost to innermost.
        body: The innermost body.

    Returns:
        A ``Lam`` chain whose binders match ``names`` in order.
    """
    fn: Term = body
    for name in reversed(names):
        fn = Lam(name, fn)
    return fn


def decompose_app(term: Term) -> tuple[Term, tuple[Term, ...]]:
    """Split an application into its head and argument tuple.

    This is the inverse of ``apply_term``. Non-application terms return
    themselves as the head with an empty argument tuple.
    """
    #  e.g. input = ((f a) b). output: [f, [a, b]]
    args: list[Term] = []
    while isinstance(term, App):
        args.append(term.right)
        term = term.left
    return term, tuple(reversed(args))
