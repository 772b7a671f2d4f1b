import pytest

from ulc.core.ast import App, Lam, Var
from ulc.core.pretty import to_text


def test_variable_renders_as_name() -> None:
    assert to_text(Var("x")) == "x"


def test_abstraction_and_application_rendering() -> None:
    assert to_text(Lam("x", Var("x"))) == "λx.x"
    assert to_text(App(Var("f"), Var("a"))) == "(f a)"


def test_nested_terms_render_recursively() -> None:
    term = Lam("f", Lam("x", App(Var("f"), App(Var("f"), Var("x")))))
    assert to_text(term) == "λf.λx.(f (f x))"


def test_rendering_is_deterministic() -> None:
    term = App(Lam("x", App(Var("x"), Var("y"))), Var("z"))
    assert to_text(term) == to_text(term)


def test_unknown_node_is_rejected() -> None:
    with pytest.raises(TypeError):
        to_text("x")  # type: ignore[arg-type]
