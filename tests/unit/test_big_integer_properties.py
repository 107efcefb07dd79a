"""
Тесты свойств BigInteger на детерминированной выборке значений

Проверяемые инварианты:
1. Round-trip: parse(to_string(x)) == x
2. Нормализация: нет старших нулей, ноль всегда положителен
3. Коммутативность сложения
4. Аддитивная обратность: a + (-a) == ZERO
5. Согласованность компаратора: ровно одно из a<b, a==b, a>b; транзитивность
6. Совпадение с нативной арифметикой Python int
"""

import random

import pytest

from bignum.core.domain import (
    ZERO,
    BigInteger,
    Ordering,
    Sign,
    add,
    compare,
    from_integer,
    negate,
    parse,
    to_string,
)

# Детерминированный генератор для воспроизводимости
_RNG = random.Random(20240611)

_EDGE_VALUES = [
    0, 1, -1, 9, -9, 10, -10, 99, 100, -100, 999, -999, 1000,
    2**63 - 1, -(2**63), 2**64, 10**30, -(10**30) + 1,
]

_SAMPLE_VALUES = _EDGE_VALUES + [
    _RNG.randint(-(10**40), 10**40) for _ in range(30)
]


@pytest.fixture
def samples() -> list[BigInteger]:
    """Выборка BigInteger значений"""
    return [from_integer(n) for n in _SAMPLE_VALUES]


# =============================================================================
# ПРЕДСТАВЛЕНИЕ
# =============================================================================


class TestRepresentationInvariants:
    """Round-trip и нормализация"""

    def test_round_trip(self, samples: list[BigInteger]) -> None:
        """parse(to_string(x)) == x"""
        for x in samples:
            assert parse(to_string(x)) == x

    def test_string_matches_native(self) -> None:
        for n in _SAMPLE_VALUES:
            assert to_string(from_integer(n)) == str(n)

    def test_no_trailing_zero_digits(self, samples: list[BigInteger]) -> None:
        """Старший разряд ненулевой, кроме нуля"""
        for x in samples:
            assert len(x.digits) >= 1
            assert all(0 <= d <= 9 for d in x.digits)
            if x.is_zero:
                assert x.digits == (0,)
                assert x.sign is Sign.POSITIVE
            else:
                assert x.digits[-1] != 0

    def test_arithmetic_results_normalized(self, samples: list[BigInteger]) -> None:
        """Результаты операций тоже нормализованы"""
        for a in samples[:12]:
            for b in samples[:12]:
                for result in (a + b, a - b):
                    if result.is_zero:
                        assert result.digits == (0,)
                        assert result.sign is Sign.POSITIVE
                    else:
                        assert result.digits[-1] != 0


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ СВОЙСТВА
# =============================================================================


class TestAlgebraicProperties:
    """Коммутативность, обратный элемент, согласованность с int"""

    def test_commutativity(self, samples: list[BigInteger]) -> None:
        for a in samples:
            for b in samples:
                assert add(a, b) == add(b, a)

    def test_additive_inverse(self, samples: list[BigInteger]) -> None:
        for a in samples:
            result = add(a, negate(a))
            assert result == ZERO
            assert result.sign is Sign.POSITIVE

    def test_double_negation(self, samples: list[BigInteger]) -> None:
        for a in samples:
            assert negate(negate(a)) == a

    def test_addition_matches_native(self) -> None:
        for x in _SAMPLE_VALUES:
            for y in _SAMPLE_VALUES:
                assert int(from_integer(x) + from_integer(y)) == x + y

    def test_subtraction_matches_native(self) -> None:
        for x in _SAMPLE_VALUES:
            for y in _SAMPLE_VALUES:
                assert int(from_integer(x) - from_integer(y)) == x - y

    def test_subtraction_is_addition_of_negation(self, samples: list[BigInteger]) -> None:
        for a in samples[:15]:
            for b in samples[:15]:
                assert a - b == a + (-b)


# =============================================================================
# КОМПАРАТОР
# =============================================================================


class TestComparatorConsistency:
    """Компаратор задаёт полный порядок, согласованный со значениями"""

    def test_trichotomy(self, samples: list[BigInteger]) -> None:
        """Ровно одно из a<b, a==b, a>b"""
        for a in samples:
            for b in samples:
                outcomes = [a < b, a == b, a > b]
                assert outcomes.count(True) == 1

    def test_antisymmetry(self, samples: list[BigInteger]) -> None:
        for a in samples:
            for b in samples:
                assert compare(a, b) == Ordering(-compare(b, a))

    def test_matches_native_order(self) -> None:
        for x in _SAMPLE_VALUES:
            for y in _SAMPLE_VALUES:
                expected = (x > y) - (x < y)
                assert compare(from_integer(x), from_integer(y)) == expected

    def test_sorted_matches_native(self) -> None:
        values = sorted(from_integer(n) for n in _SAMPLE_VALUES)
        assert [int(v) for v in values] == sorted(_SAMPLE_VALUES)

    def test_transitivity(self, samples: list[BigInteger]) -> None:
        subset = samples[:15]
        for a in subset:
            for b in subset:
                for c in subset:
                    if a <= b and b <= c:
                        assert a <= c
