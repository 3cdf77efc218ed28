import pytest

from mal.errors import MalEvaluationError, MalTypeError
from mal.types.symbol import Symbol


def test_quote_returns_form_unevaluated(run):
    assert run("'(+ 1 2)") == [Symbol("+"), 1, 2]
    assert run("(quote undefined)") == Symbol("undefined")


def test_quasiquote_simple(run):
    assert run("`(1 2 3)") == [1, 2, 3]


def test_quasiquote_with_unquote(run):
    run("(def! x 2)")
    assert run("`(1 ~x 3)") == [1, 2, 3]
    assert run("`(1 ~(+ x 1))") == [1, 3]


def test_quasiquote_with_splice_unquote(run):
    run("(def! xs (list 2 3))")
    assert run("`(1 ~@xs 4)") == [1, 2, 3, 4]
    assert run("`(~@xs)") == [2, 3]


def test_quasiquote_nested_lists(run):
    run("(def! x 5)")
    assert run("`(a (b ~x))") == [Symbol("a"), [Symbol("b"), 5]]


def test_nested_quasiquote_keeps_inner_unquotes(run):
    run("(def! x 5)")
    assert run("`(1 `(2 ~x))") == [
        1,
        [Symbol("quasiquote"), [2, [Symbol("unquote"), Symbol("x")]]],
    ]


def test_nested_splice_unquote_lowers_depth(run):
    run("(def! c 7)")
    assert run("``(~@(x ~c))") == [
        Symbol("quasiquote"),
        [[Symbol("splice-unquote"), [Symbol("x"), 7]]],
    ]
    assert run("``(~@(x c))") == [
        Symbol("quasiquote"),
        [[Symbol("splice-unquote"), [Symbol("x"), Symbol("c")]]],
    ]


def test_quasiquote_atom(run):
    assert run("`a") == Symbol("a")
    assert run("`7") == 7


def test_splice_unquote_requires_list(run):
    with pytest.raises(MalTypeError):
        run("`(1 ~@42)")


def test_unquote_outside_quasiquote(run):
    with pytest.raises(MalEvaluationError):
        run("~x")
    with pytest.raises(MalEvaluationError):
        run("~@x")
