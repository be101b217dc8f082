"""
Тесты для арифметических примитивов

Проверяет:
1. Базовую арифметику и деление на ноль
2. is_integer как общий шлюз допуска
3. fact: область определения и переполнение
4. power: только целые неотрицательные показатели
5. root: Newton–Raphson, степень и знак подкоренного выражения
6. modulo: евклидов остаток
7. Чистоту функций при параллельных вызовах
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from src.core.math.errors import (
    CalculatorError,
    DivideByZero,
    ErrorKind,
    InvalidArgument,
    Overflow,
)
from src.core.math.primitives import (
    add,
    div,
    fact,
    is_integer,
    modulo,
    mul,
    power,
    root,
    sub,
)

# =============================================================================
# БАЗОВАЯ АРИФМЕТИКА
# =============================================================================


class TestBasicArithmetic:
    """Тесты add/sub/mul/div"""

    def test_add(self) -> None:
        assert add(5.0, 5.0) == 10.0
        assert add(0.0, 0.0) == 0.0
        assert add(-10.0, 5.0) == -5.0
        assert add(1.25, 1.25) == 2.5

    def test_sub(self) -> None:
        assert sub(5.0, 5.0) == 0.0
        assert sub(5.0, 6.0) == -1.0
        assert sub(1.25, 3.75) == -2.5

    def test_mul(self) -> None:
        assert mul(5.0, 3.0) == 15.0
        assert mul(0.0, 5.0) == 0.0
        assert mul(3.0, -5.0) == -15.0
        assert mul(1.25, 1.25) == 1.5625

    def test_div(self) -> None:
        assert div(4.0, 3.0) == pytest.approx(1.33333, abs=1e-4)
        assert div(5.0, 2.0) == 2.5
        assert div(-5.0, 5.0) == -1.0

    def test_div_by_zero_raises(self) -> None:
        with pytest.raises(DivideByZero, match="Division by zero"):
            div(5.0, 0.0)

        with pytest.raises(DivideByZero):
            div(0.0, -0.0)

    def test_div_tiny_divisor_is_not_zero(self) -> None:
        """Только точный ноль считается делением на ноль"""
        assert div(1.0, 1e-300) == pytest.approx(1e300)

    @pytest.mark.parametrize(
        "a,b",
        [(7.0, 3.0), (-1.5, 0.1), (1e10, 7.0), (0.0, 2.0), (123.456, -0.001)],
    )
    def test_div_mul_round_trip(self, a: float, b: float) -> None:
        assert div(mul(div(a, b), b), 1) == pytest.approx(a, rel=1e-12, abs=1e-12)


# =============================================================================
# IS_INTEGER
# =============================================================================


class TestIsInteger:
    """Тесты для is_integer"""

    def test_large_integer(self) -> None:
        assert is_integer(1e12)

    def test_large_integer_with_fraction(self) -> None:
        assert not is_integer(1e12 + 0.0001)

    def test_noise_from_division(self) -> None:
        assert is_integer(5.0000000000001)
        assert is_integer(div(mul(div(10.0, 3.0), 3.0), 2.0))

    def test_fractions(self) -> None:
        assert not is_integer(0.5)
        assert not is_integer(-2.4)

    def test_non_finite(self) -> None:
        assert not is_integer(float("inf"))
        assert not is_integer(float("nan"))


# =============================================================================
# FACTORIAL
# =============================================================================


class TestFact:
    """Тесты для fact"""

    def test_base_cases(self) -> None:
        assert fact(0) == 1.0
        assert fact(1) == 1.0

    def test_small_values(self) -> None:
        assert fact(5) == 120.0
        assert fact(10) == 3628800.0

    def test_accepts_float_noise(self) -> None:
        assert fact(5.0000000000001) == 120.0

    def test_largest_finite(self) -> None:
        result = fact(170)
        assert result == pytest.approx(7.257415615307994e306)

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="negative"):
            fact(-1)

        with pytest.raises(InvalidArgument):
            fact(-5)

    def test_non_integer_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="integer"):
            fact(5.5)

        with pytest.raises(InvalidArgument):
            fact(8.1)

    def test_overflow(self) -> None:
        with pytest.raises(Overflow, match="overflow"):
            fact(1000)

    def test_first_overflow_at_171(self) -> None:
        with pytest.raises(Overflow):
            fact(171)

    def test_huge_input_overflows_quickly(self) -> None:
        with pytest.raises(Overflow):
            fact(1e15)


# =============================================================================
# POWER
# =============================================================================


class TestPower:
    """Тесты для power"""

    @pytest.mark.parametrize("x", [0.0, 1.0, -1.0, 5.0, -3.5, 1e300, 1e-300])
    def test_zero_exponent_is_one(self, x: float) -> None:
        assert power(x, 0) == 1.0

    def test_zero_to_zero(self) -> None:
        assert power(0, 0) == 1.0

    def test_integer_exponents(self) -> None:
        assert power(5, 2) == 25.0
        assert power(2, 10) == 1024.0
        assert power(-2, 3) == -8.0
        assert power(0.5, 2) == 0.25
        assert power(7, 1) == 7.0

    def test_accepts_float_noise_in_exponent(self) -> None:
        assert power(5, 2.0000000000001) == 25.0

    def test_large_result_goes_infinite(self) -> None:
        assert power(10, 400) == float("inf")

    def test_negative_exponent_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="non-negative"):
            power(2, -3)

        with pytest.raises(InvalidArgument):
            power(2, -2)

    def test_fractional_exponent_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="integer"):
            power(5, 2.4)


# =============================================================================
# ROOT
# =============================================================================


class TestRoot:
    """Тесты для root"""

    def test_cube_root(self) -> None:
        assert root(8, 3) == pytest.approx(2.0, abs=1e-4)

    def test_square_root(self) -> None:
        assert root(9, 2) == pytest.approx(3.0, abs=1e-4)
        assert root(2, 2) == pytest.approx(1.4142135623730951, abs=1e-9)

    def test_fourth_root(self) -> None:
        assert root(16, 4) == pytest.approx(2.0, abs=1e-9)

    def test_fractional_radicand(self) -> None:
        assert root(0.25, 2) == pytest.approx(0.5, abs=1e-9)

    def test_odd_root_of_negative(self) -> None:
        assert root(-8, 3) == pytest.approx(-2.0, abs=1e-9)

    def test_first_degree_is_identity(self) -> None:
        assert root(5, 1) == pytest.approx(5.0)

    def test_zero_radicand(self) -> None:
        assert root(0, 2) == 0.0
        assert root(0, 3) == 0.0

    def test_small_radicand_high_degree(self) -> None:
        """|a| < 1 с большой степенью сходится к корню, а не расходится"""
        assert root(0.1, 50) == pytest.approx(0.954992586021436, rel=1e-9)
        assert root(0.001, 200) == pytest.approx(10 ** (-3 / 200), rel=1e-9)

    def test_tiny_radicand(self) -> None:
        assert root(1e-300, 3) == pytest.approx(1e-100, rel=1e-9)
        assert root(-1e-300, 3) == pytest.approx(-1e-100, rel=1e-9)

    def test_huge_radicand(self) -> None:
        assert root(1e300, 2) == pytest.approx(1e150, rel=1e-9)
        assert root(1e300, 50) == pytest.approx(1e6, rel=1e-9)

    def test_root_raises_only_invalid_argument(self) -> None:
        for a, b in ((1e-300, 3), (0.001, 200), (5e-324, 2), (1.7e308, 700)):
            assert root(a, b) > 0

    def test_even_root_of_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="negative"):
            root(-8, 2)

    def test_zero_degree_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="positive integer"):
            root(8, 0)

    def test_negative_degree_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            root(8, -2)

    def test_fractional_degree_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            root(8, 1.5)


# =============================================================================
# MODULO
# =============================================================================


class TestModulo:
    """Тесты для modulo"""

    def test_positive_operands(self) -> None:
        assert modulo(10, 3) == 1.0
        assert modulo(9, 3) == 0.0
        assert modulo(2, 5) == 2.0

    def test_negative_dividend_normalized(self) -> None:
        assert modulo(-10, 3) == 2.0
        assert modulo(-1, 5) == 4.0

    def test_negative_divisor(self) -> None:
        assert modulo(10, -3) == 1.0
        assert modulo(-10, -3) == 2.0

    def test_result_in_range(self) -> None:
        for a in range(-20, 21):
            for b in (-7, -3, 2, 5):
                assert 0.0 <= modulo(a, b) < abs(b)

    def test_accepts_float_noise(self) -> None:
        assert modulo(10.0000000000001, 3) == 1.0

    def test_zero_divisor_raises(self) -> None:
        with pytest.raises(DivideByZero, match="Modulo by zero"):
            modulo(10, 0)

    def test_non_integer_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="integer"):
            modulo(10.5, 3)

        with pytest.raises(InvalidArgument):
            modulo(10, 2.5)


# =============================================================================
# ERROR TAXONOMY
# =============================================================================


class TestErrorTaxonomy:
    """Тесты иерархии ошибок"""

    def test_kinds(self) -> None:
        assert DivideByZero.kind == ErrorKind.DIVIDE_BY_ZERO
        assert InvalidArgument.kind == ErrorKind.INVALID_ARGUMENT
        assert Overflow.kind == ErrorKind.OVERFLOW

    def test_builtin_compatibility(self) -> None:
        """Ошибки ловятся и по встроенным типам Python"""
        with pytest.raises(ZeroDivisionError):
            div(1, 0)

        with pytest.raises(ValueError):
            fact(-1)

        with pytest.raises(OverflowError):
            fact(1000)

    def test_common_base(self) -> None:
        for call in (lambda: div(1, 0), lambda: fact(-1), lambda: fact(1000)):
            with pytest.raises(CalculatorError):
                call()


# =============================================================================
# PURITY
# =============================================================================


class TestConcurrentPurity:
    """Параллельные вызовы дают те же результаты, что и последовательные"""

    def test_parallel_matches_sequential(self) -> None:
        calls = (
            [(fact, (float(n),)) for n in range(0, 40)]
            + [(power, (1.5, float(n))) for n in range(0, 40)]
            + [(root, (float(n), 3.0)) for n in range(1, 40)]
            + [(modulo, (float(n), 7.0)) for n in range(-20, 20)]
            + [(div, (float(n), 3.0)) for n in range(-20, 20)]
        )

        sequential = [fn(*args) for fn, args in calls]

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures = [pool.submit(fn, *args) for fn, args in calls]
            parallel = [f.result() for f in futures]

        assert parallel == sequential
