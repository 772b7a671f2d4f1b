from ulc.core.ast import App, Lam, Var
from ulc.core.util import apply_term, decompose_app, nested_lam


def test_apply_term_associates_left() -> None:
    f, a, b = Var("f"), Var("a"), Var("b")
    assert apply_term(f, a, b) == App(App(f, a), b)
    assert apply_term(f) == f


def test_nested_lam_binds_first_name_outermost() -> None:
    assert nested_lam("x", "y", body=Var("x")) == Lam("x", Lam("y", Var("x")))
    assert nested_lam(body=Var("x")) == Var("x")


def test_decompose_app_inverts_apply_term() -> None:
    head = Lam("x", Var("x"))
    args = (Var("a"), Var("b"))
    assert decompose_app(apply_term(head, *args)) == (head, args)
    assert decompose_app(Var("x")) == (Var("x"), ())
