"""
Тесты для Comparison — полный порядок на DecimalNumber

Проверяет:
1. Порядок через разные масштабы дробей и знаки
2. Бесконечности со знаком
3. Равенство с учётом масштаба дроби
4. compare_to с посторонними типами (INCOMPARABLE)
5. Хеширование, согласованное с равенством
6. Трихотомию на наборе значений
"""

import itertools
import random

import pytest

from uncontrolled import INCOMPARABLE, DecimalNumber
from uncontrolled.core.math.comparison import compare


def d(text: str) -> DecimalNumber:
    return DecimalNumber.parse(text)


ORDERED = [
    "-inf",
    "-10.5",
    "-10.25",
    "-1",
    "-0.5",
    "-0.05",
    "0",
    "0.0001",
    "0.001",
    "0.01",
    "0.1",
    "0.5",
    "1",
    "1.05",
    "1.5",
    "10",
    "inf",
]


class TestOrdering:
    """Тесты упорядочивания"""

    def test_sorting(self) -> None:
        """Перемешанный набор сортируется в ожидаемом порядке"""
        values = [d(text) for text in ORDERED]
        shuffled = values[:]
        random.Random(1234).shuffle(shuffled)

        assert sorted(shuffled) == values

    def test_leading_zeros_mean_smaller_magnitude(self) -> None:
        """Больше ведущих нулей → меньше величина"""
        assert d("0.05") < d("0.5")
        assert d("0.0012") < d("0.012")
        assert d("0.009") < d("0.01")

    def test_negative_direction_flipped(self) -> None:
        """Для отрицательных бОльшая дробь означает меньшее число"""
        assert d("-10.5") < d("-10.25")
        assert d("-0.5") < d("-0.05")

    def test_sign_first(self) -> None:
        assert d("-0.001") < d("0")
        assert d("-1000") < d("0.001")

    def test_integer_part_before_fraction(self) -> None:
        assert d("1.999") < d("2.001")
        assert d("-2.001") < d("-1.999")

    def test_compare_values(self) -> None:
        assert compare(d("1.5"), d("1.25")) == 1
        assert compare(d("1.25"), d("1.5")) == -1
        assert compare(d("1.50"), d("1.5")) == 0

    def test_comparison_operators(self) -> None:
        assert d("1.5") >= d("1.5")
        assert d("1.5") <= d("1.5")
        assert d("1.5") > d("1.49")
        assert not d("1.5") < d("1.5")


class TestInfinityOrdering:
    """Бесконечности сравниваются по знаковому значению"""

    def test_infinity_bounds(self) -> None:
        inf = DecimalNumber.infinity()
        neg_inf = DecimalNumber.infinity(negative=True)
        huge = d("1" + "0" * 100)

        assert huge < inf
        assert -huge > neg_inf
        assert neg_inf < inf

    def test_same_infinity_equal(self) -> None:
        assert DecimalNumber.infinity() == DecimalNumber.infinity()
        assert compare(DecimalNumber.infinity(), DecimalNumber.infinity()) == 0


class TestEquality:
    """Тесты равенства"""

    def test_trailing_zeros_irrelevant(self) -> None:
        assert d("1.50") == d("1.5")

    def test_leading_zeros_checked(self) -> None:
        """.05 и .5 имеют одинаковый significand, но разный масштаб"""
        assert d("0.05") != d("0.5")
        assert d("1.005") != d("1.5")

    def test_sign_checked(self) -> None:
        assert d("-0.5") != d("0.5")
        assert DecimalNumber.infinity() != DecimalNumber.infinity(negative=True)

    def test_other_types_not_equal(self) -> None:
        assert d("1.5") != 1.5
        assert d("1") != "1"

    def test_ordering_with_other_types_rejected(self) -> None:
        with pytest.raises(TypeError):
            d("1") < 2  # type: ignore[operator]

    def test_hash_consistent(self) -> None:
        assert hash(d("1.50")) == hash(d("1.5"))
        assert len({d("1.5"), d("1.50"), d("0.15"), d("0.015")}) == 3


class TestCompareTo:
    """Тесты compare_to"""

    def test_compare_to(self) -> None:
        assert d("1").compare_to(d("2")) == -1
        assert d("2").compare_to(d("1")) == 1
        assert d("2").compare_to(d("2.0")) == 0

    def test_unrelated_type_is_incomparable(self) -> None:
        """Посторонний тип → INCOMPARABLE без исключения"""
        assert d("1").compare_to("1") is INCOMPARABLE
        assert d("1").compare_to(1.0) is INCOMPARABLE


SAMPLES = ["-inf", "-3.75", "-0.5", "-0.005", "0", "0.05", "0.5", "1.25", "123.456", "inf"]


class TestTrichotomy:
    """Ровно одно из a < b, a == b, a > b"""

    @pytest.mark.parametrize("a, b", list(itertools.product(SAMPLES, repeat=2)))
    def test_exactly_one_relation(self, a: str, b: str) -> None:
        x, y = d(a), d(b)
        relations = [x < y, x == y, x > y]
        assert relations.count(True) == 1
