"""
Digit-Vector Arithmetic — поразрядная арифметика над векторами цифр

Модуль содержит чистые функции над кортежами десятичных цифр, хранящимися
от младшего разряда к старшему (digits[0] — единицы):
- Нормализация (удаление старших нулей)
- Сравнение модулей
- Сложение модулей с переносом
- Вычитание модулей с заёмом
- Разложение натурального int на цифры
- Установка цифры с расширением вектора

Знак числа здесь не учитывается: функции работают только с модулями.
Знаковая диспетчеризация — в bignum.core.domain.big_integer.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вектор никогда не пуст; ноль представлен как (0,)
2. Каждая цифра в диапазоне [0, RADIX - 1]
3. Результаты add/subtract всегда нормализованы
4. Входные кортежи никогда не изменяются (возвращается новый кортеж)
"""

from typing import Final, Sequence

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Основание системы счисления
RADIX: Final[int] = 10

# Канонический вектор нуля
ZERO_DIGITS: Final[tuple[int, ...]] = (0,)


# =============================================================================
# ДОСТУП К ЦИФРАМ
# =============================================================================


def digit_at(digits: Sequence[int], index: int) -> int:
    """
    Цифра в разряде index с неявным дополнением нулями.

    Для index >= len(digits) возвращает 0, что позволяет сложению и вычитанию
    проходить до общей верхней границы без проверок длины.

    Args:
        digits: Вектор цифр (младший разряд первым)
        index: Номер разряда (0 — единицы)

    Returns:
        Цифра разряда или 0 за пределами вектора

    Raises:
        IndexError: Если index < 0
    """
    if index < 0:
        raise IndexError(f"digit index must be non-negative, got {index}")

    if index >= len(digits):
        return 0
    return digits[index]


def set_digit(digits: Sequence[int], index: int, value: int) -> tuple[int, ...]:
    """
    Установка цифры в разряд index.

    Если index выходит за пределы вектора, вектор дополняется нулями.
    Исходный вектор не изменяется.

    Args:
        digits: Исходный вектор цифр
        index: Номер разряда (>= 0)
        value: Цифра [0, 9]

    Returns:
        Новый (ненормализованный) вектор цифр

    Examples:
        >>> set_digit((0,), 3, 7)
        (0, 0, 0, 7)
        >>> set_digit((1, 2), 0, 5)
        (5, 2)
    """
    if index < 0:
        raise IndexError(f"digit index must be non-negative, got {index}")
    if not 0 <= value < RADIX:
        raise ValueError(f"digit must be in [0, {RADIX - 1}], got {value}")

    grown = list(digits)
    if index >= len(grown):
        grown.extend([0] * (index + 1 - len(grown)))
    grown[index] = value
    return tuple(grown)


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def normalize_digits(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Удаление старших (хвостовых) нулей вектора.

    Единственная цифра нуля никогда не удаляется.

    Args:
        digits: Вектор цифр (может содержать старшие нули)

    Returns:
        Нормализованный вектор; пустой вход возвращается как пустой кортеж,
        чтобы валидация длины отработала выше по стеку

    Examples:
        >>> normalize_digits((7, 0, 0))
        (7,)
        >>> normalize_digits((0, 0, 0))
        (0,)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    return tuple(digits[:end])


def is_zero_digits(digits: Sequence[int]) -> bool:
    """Проверка, что нормализованный вектор представляет ноль."""
    return len(digits) == 1 and digits[0] == 0


def int_to_digits(value: int) -> tuple[int, ...]:
    """
    Разложение неотрицательного int на цифры (младший разряд первым).

    Повторное деление на 10 с остатком; для 0 возвращает (0,).

    Args:
        value: Неотрицательное целое

    Returns:
        Нормализованный вектор цифр

    Raises:
        ValueError: Если value < 0
    """
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    digits = []
    while True:
        value, digit = divmod(value, RADIX)
        digits.append(digit)
        if value == 0:
            break
    return tuple(digits)


def digits_to_int(digits: Sequence[int]) -> int:
    """Сборка неотрицательного int из вектора цифр (схема Горнера)."""
    result = 0
    for digit in reversed(digits):
        result = result * RADIX + digit
    return result


# =============================================================================
# СРАВНЕНИЕ МОДУЛЕЙ
# =============================================================================


def compare_magnitudes(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Сравнение модулей двух нормализованных векторов.

    Алгоритм:
        1. Больше разрядов → больше модуль (векторы нормализованы)
        2. При равной длине — поразрядно от старшего к младшему,
           первый различающийся разряд определяет порядок

    Args:
        a: Первый вектор (нормализованный)
        b: Второй вектор (нормализованный)

    Returns:
        -1 если |a| < |b|
         0 если |a| == |b|
        +1 если |a| > |b|

    Examples:
        >>> compare_magnitudes((9, 9), (0, 0, 1))
        -1
        >>> compare_magnitudes((3, 2, 1), (4, 2, 1))
        -1
        >>> compare_magnitudes((5,), (5,))
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return -1 if a[i] < b[i] else 1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ МОДУЛЕЙ
# =============================================================================


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    """
    Сложение модулей в столбик.

    Перенос возникает при сумме разряда >= 10 (сумма ровно 10 тоже даёт
    перенос). Оставшийся после цикла перенос добавляется старшим разрядом.

    Args:
        a: Первое слагаемое
        b: Второе слагаемое

    Returns:
        Нормализованный вектор |a| + |b|

    Examples:
        >>> add_magnitudes((9, 9, 9), (1,))
        (0, 0, 0, 1)
        >>> add_magnitudes((5,), (5,))
        (0, 1)
    """
    result = []
    carry = 0

    for i in range(max(len(a), len(b))):
        column = digit_at(a, i) + digit_at(b, i) + carry
        if column >= RADIX:
            column -= RADIX
            carry = 1
        else:
            carry = 0
        result.append(column)

    if carry > 0:
        result.append(carry)

    return normalize_digits(result)


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> tuple[int, ...]:
    """
    Вычитание модулей в столбик: |larger| - |smaller|.

    Требует |larger| >= |smaller|. Результат может содержать старшие нули
    (например, 100 - 99), поэтому всегда нормализуется.

    Args:
        larger: Уменьшаемое (больший модуль)
        smaller: Вычитаемое (меньший модуль)

    Returns:
        Нормализованный вектор разности

    Raises:
        ValueError: Если |larger| < |smaller|

    Examples:
        >>> subtract_magnitudes((9, 9, 9), (0, 0, 1))
        (9, 9, 8)
        >>> subtract_magnitudes((0, 0, 1), (9, 9))
        (1,)
    """
    result = []
    borrow = 0

    for i in range(max(len(larger), len(smaller))):
        column = digit_at(larger, i) - digit_at(smaller, i) - borrow
        if column < 0:
            column += RADIX
            borrow = 1
        else:
            borrow = 0
        result.append(column)

    if borrow:
        raise ValueError("minuend magnitude is smaller than subtrahend magnitude")

    return normalize_digits(result)
