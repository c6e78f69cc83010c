import pytest

from mallet import errors


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+)", 0),
        ("(+ 5)", 5),
        ("(+ 1 2 3)", 6),
        ("(+ 1 -2)", -1),
        ("(*)", 1),
        ("(* 2 3 4)", 24),
        ("(- 5)", 5),
        ("(- 10 4 1)", 5),
        ("(- 1 10)", -9),
        ("(/ 20 2 5)", 2),
        ("(/ 7 2)", 3),
        ("(/ -7 2)", -3),
        ("(/ 7 -2)", -3),
        ("(/ 9)", 9),
        ("(+ 1 0.5)", 1.5),
        ("(* 2 1.5)", 3.0),
        ("(/ 1 4.0)", 0.25),
        ("(- 2.5 1)", 1.5),
    ],
)
def test_arithmetic(run, source, expected):
    result = run(source)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "source",
    ["(+ 1 :a)", '(* "2" 3)', "(- nil 1)", "(/ 4 [2])", "(+ true 1)", "(- 1 false)"],
)
def test_non_numeric_argument(run, source):
    with pytest.raises(errors.MalletTypeError, match="not a number"):
        run(source)


@pytest.mark.parametrize("source", ["(/ 1 0)", "(/ 10 2 0)", "(/ 1.5 0)", "(/ 1 0.0)"])
def test_division_by_zero(run, source):
    with pytest.raises(errors.DivisionByZeroError, match="division by 0"):
        run(source)


@pytest.mark.parametrize("source", ["(-)", "(/)"])
def test_needs_a_first_argument(run, source):
    with pytest.raises(errors.ArityError):
        run(source)


@pytest.mark.parametrize(
    "source",
    [
        "(+ 9223372036854775807 1)",
        "(- -9223372036854775807 2)",
        "(* 4294967296 4294967296)",
    ],
)
def test_integer_overflow(run, source):
    with pytest.raises(errors.IntegerOverflowError):
        run(source)


def test_int_min_divided_by_minus_one_overflows(run):
    with pytest.raises(errors.IntegerOverflowError):
        run("(/ (- -9223372036854775807 1) -1)")


# -------------------------------
# Comparison
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2)", True),
        ("(< 2 1)", False),
        ("(< 1 2 3)", True),
        ("(< 1 3 2)", False),
        ("(< 1 1)", False),
        ("(<= 1 1 2)", True),
        ("(<= 1 2 1)", False),
        ("(> 3 2 1)", True),
        ("(> 3 1 2)", False),
        ("(>= 3 3 1)", True),
        ("(>= 1 2)", False),
        ("(< 1)", True),
        ("(< 1 1.5 2)", True),
    ],
)
def test_comparison_chains_adjacent_pairs(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("op", ["<", "<=", ">", ">="])
def test_comparison_type_error(run, op):
    with pytest.raises(errors.MalletTypeError):
        run(f"({op} 1 :two)")


@pytest.mark.parametrize("op", ["<", "<=", ">", ">="])
def test_comparison_needs_an_argument(run, op):
    with pytest.raises(errors.ArityError):
        run(f"({op})")


# -------------------------------
# Equality
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(=)", True),
        ("(= 1)", True),
        ("(= 1 1)", True),
        ("(= 1 2)", False),
        ("(= 1 1 1)", True),
        ("(= 1 1 2)", False),
        ("(= 1 1.0)", True),
        ('(= "a" "a")', True),
        ('(= "a" "b")', False),
        ("(= :a :a)", True),
        ('(= :a "a")', False),
        ("(= nil nil)", True),
        ("(= nil false)", False),
        ("(= true true)", True),
        ("(= true 1)", False),
        ("(= (+ 1 1) 2)", True),
        ("(= [1 2] [1 2])", True),
        ("(= [1 2] [1 2 3])", False),
        ("(= {:a 1 :b 2} {:b 2 :a 1})", True),
        ("(= {:a 1} {:a 2})", False),
        ("(= {:a 1} {:b 1})", False),
        ("(= {:a 1 :a 1} {:a 1 :b 2})", False),
        ("(= {:a 1 :b 2} {:a 1 :a 1})", False),
        ("(= {:a 1 :a 2} {:a 1})", True),
        ("(= {:a 1} {:a 1 :a 2})", True),
    ],
)
def test_equality(run, source, expected):
    assert run(source) is expected


def test_nested_list_equality(run):
    assert run("(= (1 2) (1 3))") is False
    assert run("(= ((1 2) (1 2)) ((1 2) (1 2)))") is True
    assert run("(= ((1 2) (1 2)) ((1 2) (1 3)))") is False


def test_list_never_equals_vector(run):
    assert run("(= (1 2) [1 2])") is False


@pytest.mark.parametrize(
    "left,right",
    [
        ("{:a 1 :a 1}", "{:a 1 :b 2}"),
        ("{:a 1 :b 2 :b 3}", "{:b 2 :a 1}"),
        ('{"k" [1] :k 2}', '{:k 2 "k" [1] "k" 3}'),
    ],
)
def test_hashmap_equality_is_symmetric(run, left, right):
    assert run(f"(= {left} {right})") is run(f"(= {right} {left})")


@pytest.mark.parametrize(
    "source",
    [
        "(* 1e308 10)",
        "(+ 1.5e308 1.5e308)",
        "(- -1e308 1e308)",
        "(/ 1e308 0.1)",
    ],
)
def test_real_overflow(run, source):
    with pytest.raises(errors.RealOverflowError, match="not finite"):
        run(source)
