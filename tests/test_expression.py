import pytest

from estructuras.expression import (
    POSTFIX_EXAMPLE,
    PREFIX_EXAMPLE,
    ExpressionTree,
    is_operator,
    main,
    parse_postfix,
    parse_prefix,
)


@pytest.mark.parametrize("char", ["+", "-", "*", "/", "%"])
def test_operators_recognised(char):
    assert is_operator(char) is True


@pytest.mark.parametrize("char", ["5", "a", " ", "^"])
def test_non_operators_rejected(char):
    assert is_operator(char) is False


@pytest.mark.parametrize("expression", ["12+", "45+23+*", POSTFIX_EXAMPLE])
def test_postfix_round_trip(expression):
    assert "".join(parse_postfix(expression).postfix()) == expression


def test_postfix_tree_structure():
    tree = parse_postfix("12+")
    assert tree.root.value == "+"
    assert tree.root.left.value == "1"
    assert tree.root.right.value == "2"
    assert tree.infix() == ["1", "+", "2"]
    assert tree.prefix() == ["+", "1", "2"]


def test_prefix_parse_reverses_operands():
    expression = "-52"
    tree = parse_prefix(expression)
    assert tree.postfix() == list(reversed(expression))
    assert tree.evaluate() == parse_postfix(expression[::-1]).evaluate()


def test_prefix_example_matches_reversed_postfix():
    tree = parse_prefix(PREFIX_EXAMPLE)
    assert "".join(tree.postfix()) == PREFIX_EXAMPLE[::-1]


def test_postfix_example_value():
    assert parse_postfix(POSTFIX_EXAMPLE).evaluate() == 9


def test_prefix_example_value():
    assert parse_prefix(PREFIX_EXAMPLE).evaluate() == -8


def test_single_operand():
    assert parse_postfix("7").evaluate() == 7


def test_division_truncates_toward_zero():
    assert parse_postfix("07-2/").evaluate() == -3


def test_modulo_operator_adds():
    assert parse_postfix("34%").evaluate() == parse_postfix("34+").evaluate()


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        parse_postfix("50/").evaluate()


@pytest.mark.parametrize("expression", ["", "+", "1+"])
def test_malformed_expressions(expression):
    with pytest.raises(ValueError):
        parse_postfix(expression)


def test_empty_tree():
    tree = ExpressionTree()
    assert tree.prefix() == []
    assert tree.postfix() == []
    with pytest.raises(ValueError):
        tree.infix()
    with pytest.raises(ValueError):
        tree.evaluate()


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("EJERCICIO 1 \n")
    assert "3. Imprimir Resultado=\n-8\n" in out
    assert out.endswith("3. Imprimir Resultado=\n9\n")