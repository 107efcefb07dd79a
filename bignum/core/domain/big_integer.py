"""
BigInteger — знаковое десятичное целое произвольной точности

Immutable Pydantic модель: знак + вектор десятичных цифр (младший разряд
первым). Все арифметические операции возвращают новый экземпляр.

Способы построения:
- parse("-123")            — из десятичной строки
- from_integer(-123)       — из нативного int
- BigInteger(sign, digits) — из явной пары (знак, цифры)
- scaled(7, 3)             — value × 10^exponent (7000)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нет старших нулей, кроме нуля; ноль всегда (0,) со знаком POSITIVE
2. Каждая цифра в [0, 9]
3. Вектор цифр никогда не пуст
4. Отрицание не изменяет операнд (frozen=True)
"""

from enum import IntEnum
from typing import Annotated, Any, Final, Optional

from pydantic import BaseModel, Field, StrictInt, ValidationInfo, field_validator

from bignum.core.math.digit_vector import (
    RADIX,
    ZERO_DIGITS,
    add_magnitudes,
    compare_magnitudes,
    digit_at,
    digits_to_int,
    int_to_digits,
    is_zero_digits,
    normalize_digits,
    set_digit,
    subtract_magnitudes,
)


# =============================================================================
# ENUMS
# =============================================================================


class Sign(IntEnum):
    """Знак числа. NEGATIVE < POSITIVE."""

    NEGATIVE = -1
    POSITIVE = 1

    def flipped(self) -> "Sign":
        """Противоположный знак."""
        return Sign.POSITIVE if self is Sign.NEGATIVE else Sign.NEGATIVE


class Ordering(IntEnum):
    """Результат трёхуровневого сравнения."""

    LESS_THAN = -1
    EQUAL = 0
    GREATER_THAN = 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ParseError(ValueError):
    """
    Строка не является десятичным целым.

    Возникает, если после необязательного '-' не осталось символов или
    встретился символ, отличный от ASCII-цифры. Значение при этом не создаётся.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r} as a decimal integer: {reason}")


# =============================================================================
# BIGINTEGER MODEL
# =============================================================================

Digit = Annotated[StrictInt, Field(ge=0, le=RADIX - 1)]

_ASCII_DIGITS: Final[frozenset[str]] = frozenset("0123456789")


class BigInteger(BaseModel):
    """
    Знаковое десятичное целое произвольной точности.

    Immutable модель (frozen=True): операции создают новые экземпляры.
    Нормализация выполняется валидаторами при любом способе построения,
    поэтому явная пара (sign, digits) со старшими нулями тоже приводится
    к канонической форме.
    """

    digits: tuple[Digit, ...] = Field(
        ..., min_length=1, description="Цифры от младшего разряда к старшему"
    )
    sign: Sign = Field(default=Sign.POSITIVE, description="Знак числа")

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def strip_leading_zeros(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Удаление старших нулей."""
        return normalize_digits(v)

    @field_validator("sign")
    @classmethod
    def zero_is_positive(cls, v: Sign, info: ValidationInfo) -> Sign:
        """Ноль всегда положителен."""
        digits = info.data.get("digits")
        if digits is not None and is_zero_digits(digits):
            return Sign.POSITIVE
        return v

    # -------------------------------------------------------------------------
    # Построение
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigInteger":
        """Построение из десятичной строки (см. parse)."""
        return parse(text)

    @classmethod
    def from_int(cls, value: int) -> "BigInteger":
        """Построение из нативного int (см. from_integer)."""
        return from_integer(value)

    @classmethod
    def scaled(cls, value: int, exponent: int) -> "BigInteger":
        """Построение value × 10^exponent (см. scaled)."""
        return scaled(value, exponent)

    # -------------------------------------------------------------------------
    # Доступ к цифрам
    # -------------------------------------------------------------------------

    @property
    def length(self) -> int:
        """Количество хранимых цифр."""
        return len(self.digits)

    @property
    def is_zero(self) -> bool:
        return is_zero_digits(self.digits)

    def digit_at(self, index: int) -> int:
        """
        Цифра разряда index (0 — единицы).

        Returns:
            Цифра или 0 для index >= length (неявное дополнение нулями)

        Raises:
            IndexError: Если index < 0
        """
        return digit_at(self.digits, index)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInteger":
        return negate(self)

    def __add__(self, other: Any) -> "BigInteger":
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return add(self, other_value)

    def __radd__(self, other: Any) -> "BigInteger":
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return add(other_value, self)

    def __sub__(self, other: Any) -> "BigInteger":
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return subtract(self, other_value)

    def __rsub__(self, other: Any) -> "BigInteger":
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return subtract(other_value, self)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is Ordering.EQUAL

    def __ne__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is not Ordering.EQUAL

    def __lt__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is Ordering.LESS_THAN

    def __le__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is not Ordering.GREATER_THAN

    def __gt__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is Ordering.GREATER_THAN

    def __ge__(self, other: Any) -> bool:
        other_value = _coerce(other)
        if other_value is None:
            return NotImplemented
        return compare(self, other_value) is not Ordering.LESS_THAN

    # Согласован с __eq__, включая сравнение с int
    def __hash__(self) -> int:
        return hash(int(self))

    # -------------------------------------------------------------------------
    # Преобразования
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return int(self.sign) * digits_to_int(self.digits)

    def __bool__(self) -> bool:
        return not self.is_zero

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"BigInteger({to_string(self)!r})"


def _coerce(value: Any) -> Optional[BigInteger]:
    """Приведение операнда к BigInteger; None для неподдерживаемых типов."""
    if isinstance(value, BigInteger):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return from_integer(value)
    return None


# =============================================================================
# ПОСТРОЕНИЕ
# =============================================================================


def parse(text: str) -> BigInteger:
    """
    Разбор десятичной строки.

    Формат: необязательный ведущий '-', затем одна или более ASCII-цифр.
    Цифры читаются справа налево, результат нормализуется ("007" → 7,
    "-0" → 0).

    Args:
        text: Десятичная строка

    Returns:
        BigInteger

    Raises:
        ParseError: Если после знака нет цифр или есть недопустимый символ
        TypeError: Если text не строка

    Examples:
        >>> str(parse("-00120"))
        '-120'
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    sign = Sign.POSITIVE
    body = text
    if body.startswith("-"):
        sign = Sign.NEGATIVE
        body = body[1:]

    if not body:
        raise ParseError(text, "no digits")

    for char in body:
        if char not in _ASCII_DIGITS:
            raise ParseError(text, f"unexpected character {char!r}")

    return BigInteger(digits=tuple(int(char) for char in reversed(body)), sign=sign)


def from_integer(value: int) -> BigInteger:
    """
    Построение из нативного int.

    Модуль раскладывается на цифры делением на 10 с остатком,
    знак берётся из value (0 — положительный).

    Raises:
        TypeError: Если value не int (bool тоже отклоняется)
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"value must be int, got {type(value).__name__}")

    sign = Sign.NEGATIVE if value < 0 else Sign.POSITIVE
    return BigInteger(digits=int_to_digits(abs(value)), sign=sign)


def scaled(value: int, exponent: int) -> BigInteger:
    """
    Построение числа value × 10^exponent.

    Цифра value ставится в разряд exponent, младшие разряды заполняются
    нулями. value = 0 даёт ноль при любом exponent.

    Args:
        value: Цифра [0, 9]
        exponent: Количество нулей после value (>= 0)

    Returns:
        BigInteger

    Raises:
        ValueError: Если value вне [0, 9] или exponent < 0

    Examples:
        >>> str(scaled(1, 3))
        '1000'
    """
    if not 0 <= value < RADIX:
        raise ValueError(f"value must be a single digit in [0, {RADIX - 1}], got {value}")
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")

    return BigInteger(digits=set_digit(ZERO_DIGITS, exponent, value))


# =============================================================================
# ПРЕОБРАЗОВАНИЕ В СТРОКУ
# =============================================================================


def to_string(value: BigInteger) -> str:
    """
    Каноническая десятичная запись.

    '-' только для отрицательных ненулевых значений, цифры от старшего
    разряда, без ведущих нулей, ровно "0" для нуля.
    """
    body = "".join(str(digit) for digit in reversed(value.digits))
    if value.sign is Sign.NEGATIVE and not value.is_zero:
        return "-" + body
    return body


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare(a: BigInteger, b: BigInteger, ignore_sign: bool = False) -> Ordering:
    """
    Трёхуровневое сравнение.

    Уровни (следующий проверяется только при равенстве на предыдущем):
        1. Знак: NEGATIVE < POSITIVE (пропускается при ignore_sign)
        2. Длина нормализованного вектора цифр
        3. Цифры от старшего разряда к младшему

    Для двух отрицательных чисел результат уровней 2-3 инвертируется,
    так что порядок совпадает с порядком значений (-5 < -3).

    Args:
        a: Первое число
        b: Второе число
        ignore_sign: Сравнивать только модули

    Returns:
        Ordering.LESS_THAN / EQUAL / GREATER_THAN
    """
    if not ignore_sign and a.sign != b.sign:
        return Ordering.LESS_THAN if a.sign < b.sign else Ordering.GREATER_THAN

    magnitude_order = compare_magnitudes(a.digits, b.digits)

    if not ignore_sign and a.sign is Sign.NEGATIVE:
        magnitude_order = -magnitude_order

    return Ordering(magnitude_order)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def negate(value: BigInteger) -> BigInteger:
    """
    Смена знака.

    Возвращает новый экземпляр; операнд не изменяется. Отрицание нуля
    даёт ноль со знаком POSITIVE.
    """
    return BigInteger(digits=value.digits, sign=value.sign.flipped())


def _add_same_sign(a: BigInteger, b: BigInteger) -> BigInteger:
    # (-3) + (-4) = -7: общий знак сохраняется
    return BigInteger(digits=add_magnitudes(a.digits, b.digits), sign=a.sign)


def _subtract_smaller_magnitude(a: BigInteger, b: BigInteger) -> BigInteger:
    order = compare(a, b, ignore_sign=True)
    if order is Ordering.EQUAL:
        return ZERO

    if order is Ordering.GREATER_THAN:
        larger, smaller = a, b
    else:
        larger, smaller = b, a

    return BigInteger(
        digits=subtract_magnitudes(larger.digits, smaller.digits),
        sign=larger.sign,
    )


def add(a: BigInteger, b: BigInteger) -> BigInteger:
    """
    Сложение a + b.

    Одинаковые знаки → сложение модулей с общим знаком.
    Разные знаки → из большего модуля вычитается меньший,
    знак берётся у операнда с большим модулем.
    """
    if a.sign == b.sign:
        return _add_same_sign(a, b)
    return _subtract_smaller_magnitude(a, b)


def subtract(a: BigInteger, b: BigInteger) -> BigInteger:
    """Вычитание a - b := a + (-b)."""
    return add(a, negate(b))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[BigInteger] = from_integer(0)
ONE: Final[BigInteger] = from_integer(1)
