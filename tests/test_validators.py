import threading

import pytest

from pycalc.errors import (
    EmptyExpressionError,
    IllegalExpressionOrderError,
    InvalidExpressionError,
    UnbalancedBracketsError,
)
from pycalc.expression import (
    CommonExpressionValidator,
    Expression,
    ExpressionValidator,
    Token,
    check,
    validate,
)


@pytest.mark.parametrize(
    "pattern",
    [
        "1",
        "1+1",
        "(1)",
        "(1+1)",
        "((1))",
        "(1+1)+1",
        "1+(1+(1+1))",
        "(1)+(1)",
        "((1+1)+1)+1",
    ],
)
def test_valid_expressions(make_tokens, pattern):
    assert validate(make_tokens(pattern)) is None


def test_empty_expression():
    with pytest.raises(EmptyExpressionError):
        validate([])


def test_empty_expression_object():
    with pytest.raises(EmptyExpressionError):
        validate(Expression())


@pytest.mark.parametrize(
    "pattern",
    [
        "1)",
        "(1",
        ")(",
        "(1+1",
        "1+1)",
        "((1)",
        "(1))",
        ")1+1(",
    ],
)
def test_unbalanced_brackets(make_tokens, pattern):
    with pytest.raises(UnbalancedBracketsError):
        validate(make_tokens(pattern))


@pytest.mark.parametrize(
    "pattern",
    [
        "+1+",  # starts with operator
        "1++",  # ends with operator
        "+1",
        "1+",
        "+",
        "11+1",
        "1+1(1)",
        "(1)1",
        "()",
        "1+()",
        "(+1)",
        "(1+)",
    ],
)
def test_illegal_order(make_tokens, pattern):
    with pytest.raises(IllegalExpressionOrderError):
        validate(make_tokens(pattern))


def test_bracket_error_takes_precedence(make_tokens):
    # also illegal order, but the bracket check runs first
    with pytest.raises(UnbalancedBracketsError):
        validate(make_tokens(")1("))
    with pytest.raises(UnbalancedBracketsError):
        validate(make_tokens("+(1"))


def test_errors_share_base_class(make_tokens):
    for pattern in ["", "(1", "+1"]:
        with pytest.raises(InvalidExpressionError):
            validate(make_tokens(pattern))


def test_idempotent(make_tokens):
    tokens = make_tokens("(1+1)")
    snapshot = list(tokens)
    validate(tokens)
    validate(tokens)
    assert tokens == snapshot

    bad = make_tokens("1++")
    for _ in range(2):
        with pytest.raises(IllegalExpressionOrderError):
            validate(bad)


def test_expression_object(make_tokens):
    expression = Expression.from_tokens(make_tokens("(1+1)+1"))
    assert len(expression) == 7
    assert expression.text == "(1+1)+1"
    CommonExpressionValidator().validate_expression(expression)


def test_validate_accepts_expression(make_tokens):
    validator = CommonExpressionValidator()
    validator.validate(Expression.from_tokens(make_tokens("(1+1)+1")))
    with pytest.raises(IllegalExpressionOrderError):
        validator.validate(Expression.from_tokens(make_tokens("1+")))
    with pytest.raises(UnbalancedBracketsError):
        validator.validate(Expression.from_tokens(make_tokens("(1")))


def test_expression_like_object(make_tokens):
    class _External:
        def get_token_array(self):
            return make_tokens("1+1")

    validate(_External())


def test_rejects_unknown_input():
    with pytest.raises(TypeError):
        validate("1+1")


def test_validator_is_abstract():
    with pytest.raises(TypeError):
        ExpressionValidator()
    assert issubclass(CommonExpressionValidator, ExpressionValidator)


class TestStrictAdjacency:
    """The interior scan in strict and legacy mode."""

    @pytest.mark.parametrize("pattern", ["1+11", "11+1", "1+1+11"])
    def test_legacy_scan_skips_outer_pairs(self, make_tokens, pattern):
        tokens = make_tokens(pattern)
        CommonExpressionValidator(strict_adjacency=False).validate(tokens)
        with pytest.raises(IllegalExpressionOrderError):
            CommonExpressionValidator(strict_adjacency=True).validate(tokens)

    def test_legacy_scan_checks_interior_pairs(self, make_tokens):
        tokens = make_tokens("1+1++1")
        with pytest.raises(IllegalExpressionOrderError):
            CommonExpressionValidator(strict_adjacency=False).validate(tokens)

    @pytest.mark.parametrize("strict", [True, False])
    def test_operator_operator(self, make_tokens, strict):
        # caught by the end check in both modes
        with pytest.raises(IllegalExpressionOrderError):
            CommonExpressionValidator(strict_adjacency=strict).validate(
                make_tokens("1++")
            )

    def test_default_is_strict(self, make_tokens):
        with pytest.raises(IllegalExpressionOrderError):
            validate(make_tokens("1+11"))


def test_messages_by_locale(make_tokens):
    with pytest.raises(EmptyExpressionError, match="at least one character"):
        validate([])
    with pytest.raises(UnbalancedBracketsError, match="괄호가 올바르지 않습니다"):
        validate(make_tokens("(1"), locale="ko")
    with pytest.raises(IllegalExpressionOrderError, match="잘못된 수식입니다"):
        validate(make_tokens("+1"), locale="ko")


def test_unknown_locale(make_tokens):
    with pytest.raises(ValueError, match="Unknown message locale"):
        validate([], locale="xx")
    with pytest.raises(ValueError, match="Unknown message locale"):
        validate([Token.operand("1")], locale="xx")
    with pytest.raises(ValueError, match="Unknown message locale"):
        CommonExpressionValidator(locale="xx")


def test_unknown_locale_is_not_a_validation_failure():
    # the locale error is raised before any check runs
    with pytest.raises(ValueError, match="Unknown message locale") as excinfo:
        check([Token.operator("+")], locale="xx")
    assert not isinstance(excinfo.value, InvalidExpressionError)


def test_concurrent_calls(make_tokens):
    validator = CommonExpressionValidator()
    good = make_tokens("(1+1)+1")
    bad = make_tokens("(1+1")
    failures = []

    def _run():
        for _ in range(200):
            validator.validate(good)
            try:
                validator.validate(bad)
            except UnbalancedBracketsError:
                continue
            failures.append("bad expression accepted")

    threads = [threading.Thread(target=_run) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert failures == []


class TestStaticChecks:
    """The individual checks can be used on their own."""

    def test_check_length_over_zero(self):
        CommonExpressionValidator.check_length_over_zero([Token.operator("+")])
        with pytest.raises(EmptyExpressionError):
            CommonExpressionValidator.check_length_over_zero([])

    def test_check_bracket_pairs_ignores_order(self, make_tokens):
        CommonExpressionValidator.check_bracket_pairs(make_tokens("(++)"))

    def test_boundaries(self):
        CommonExpressionValidator.check_starts_with_open_bracket_or_operand(
            Token.open_bracket()
        )
        CommonExpressionValidator.check_ends_with_close_bracket_or_operand(
            Token.operand("2")
        )
        with pytest.raises(IllegalExpressionOrderError):
            CommonExpressionValidator.check_starts_with_open_bracket_or_operand(
                Token.close_bracket()
            )
        with pytest.raises(IllegalExpressionOrderError):
            CommonExpressionValidator.check_ends_with_close_bracket_or_operand(
                Token.open_bracket()
            )


def test_validation_summary(make_tokens):
    validator = CommonExpressionValidator()

    summary = validator.get_validation_summary(make_tokens("(1+1)"))
    assert all(summary.values())

    summary = validator.get_validation_summary(make_tokens("+1)"))
    assert summary == {
        "non_empty": True,
        "brackets_balanced": False,
        "valid_start": False,
        "valid_end": True,
        "valid_adjacency": True,
        "is_valid": False,
    }

    summary = validator.get_validation_summary([])
    assert summary["non_empty"] is False
    assert summary["is_valid"] is False


def test_validation_summary_of_expression(make_tokens):
    validator = CommonExpressionValidator()

    summary = validator.get_validation_summary(Expression.from_tokens([Token.operand("1")]))
    assert summary["is_valid"] is True

    summary = validator.get_validation_summary(Expression.from_tokens(make_tokens("1+")))
    assert summary["valid_end"] is False
    assert summary["is_valid"] is False
