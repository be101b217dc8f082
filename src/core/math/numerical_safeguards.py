"""
Numerical Safeguards — численные допуски калькулятора

Модуль собирает все epsilon-параметры и вспомогательные проверки,
которыми пользуются примитивы, вычислитель выражений и сессия ввода:
- Допуск "почти целого" значения (шум после делений)
- Критерий сходимости и лимит итераций для корня
- Допуск "почти нуля" для отображения результата
- Проверки NaN/Inf и ограничение диапазона

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые и детерминированные
2. Модуль не хранит изменяемого состояния
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Допуск для "эффективно целого" значения
# 5.0000000000001 после делений считается целым 5
EPS_INTEGER: Final[float] = 1e-12

# Критерий остановки итераций Newton–Raphson для корня (относительный)
EPS_ROOT_CONVERGENCE: Final[float] = 1e-10

# Жёсткий лимит итераций корня (единственная гарантия завершения)
ROOT_MAX_ITERATIONS: Final[int] = 1000

# Значения ближе к нулю отображаются как 0 (убирает "-0")
EPS_DISPLAY_ZERO: Final[float] = 1e-8


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def nearest_integer(value: float) -> int:
    """
    Ближайшее целое для конечного float.

    Raises:
        ValueError: Если value содержит NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")
    return int(round(value))


def is_effectively_integer(value: float, eps: float = EPS_INTEGER) -> bool:
    """
    Проверка, что значение отличается от ближайшего целого не более чем на eps.

    Args:
        value: Проверяемое значение
        eps: Допуск (default: EPS_INTEGER)

    Returns:
        True для конечных значений в пределах eps от целого

    Examples:
        >>> is_effectively_integer(5.0000000000001)
        True
        >>> is_effectively_integer(5.5)
        False
        >>> is_effectively_integer(float('inf'))
        False
    """
    if eps < 0:
        raise ValueError(f"eps must be non-negative, got {eps}")

    if not is_valid_float(value):
        return False

    return abs(value - round(value)) <= eps


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_zero(value: float, tol: float = EPS_DISPLAY_ZERO) -> bool:
    """
    Проверка, близко ли значение к нулю с учётом толерантности.

    Returns:
        True если abs(value) <= tol
    """
    return abs(value) <= tol


def has_converged(previous: float, current: float, tol: float = EPS_ROOT_CONVERGENCE) -> bool:
    """Два соседних приближения отличаются не более чем на tol * |current|."""
    return abs(current - previous) <= tol * abs(current)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(-1e-18, 0.0)
        0.0
        >>> clamp(15.0, 0.0, 10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


def snap_to_zero(value: float, tol: float = EPS_DISPLAY_ZERO) -> float:
    """Замена почти-нулевых значений (включая -0.0) на 0.0."""
    if is_zero(value, tol):
        return 0.0
    return value
