import pytest

from schedsim.postfix import calculate, evaluate, infix_to_postfix, tokenize


def test_worked_example_conversion():
    assert infix_to_postfix("4*5+6/2-1") == "4 5 * 6 2 / + 1 -"


def test_worked_example_result():
    assert evaluate(infix_to_postfix("4*5+6/2-1")) == 22


def test_tokenize_splits_symbols_and_numbers():
    assert tokenize("12+(3)") == ["12", "+", "(", "3", ")"]


def test_tokenize_joins_digits_across_spaces():
    assert tokenize("1 2 + 34") == ["12", "+", "34"]


def test_single_operand():
    assert calculate("12") == 12


def test_calculate_matches_two_step_evaluation():
    expr = "(7+3)*2-8/4"
    assert calculate(expr) == evaluate(infix_to_postfix(expr))


def test_addition_commutes():
    assert calculate("3+5") == calculate("5+3")


def test_parentheses_group():
    assert calculate("(2+3)*4") == calculate("4*(3+2)")
    assert calculate("(2+3)*4") == calculate("20")


def test_operand_order_preserved_in_postfix():
    assert infix_to_postfix("9-4").split()[:2] == ["9", "4"]


def test_division_truncates_toward_zero():
    assert calculate("0-7/2") == calculate("0-3")


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("7 0 /")


def test_unbalanced_close_paren():
    with pytest.raises(ValueError):
        infix_to_postfix("1+2)")


def test_unbalanced_open_paren():
    with pytest.raises(ValueError):
        infix_to_postfix("(1+2")


def test_unknown_token_rejected():
    with pytest.raises(ValueError):
        infix_to_postfix("2x3")


def test_evaluate_missing_operands():
    with pytest.raises(ValueError):
        evaluate("1 +")


def test_evaluate_leftover_operands():
    with pytest.raises(ValueError):
        evaluate("1 2")


def test_evaluate_empty():
    with pytest.raises(ValueError):
        evaluate("")