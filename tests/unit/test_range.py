"""
Тесты для Range и make_range

Проверяет:
1. Принадлежность значений (сценарии A, B, F)
2. Пустые диапазоны и вырожденные точки
3. Опции построения (camelCase / snake_case / имя-строка)
4. Неизменяемость и производные копии
5. Ошибки построения
"""

import pytest
from pydantic import ValidationError

from rangekit.core.domain.boundary import Boundary, value_within_lower, value_within_upper
from rangekit.core.domain.options import RangeOptions
from rangekit.core.domain.ordering import DEFAULT_ORDERING, OrderingContext
from rangekit.core.domain.range import Range, make_range
from rangekit.core.domain.specializations import integer_range
from rangekit.core.errors import (
    InconsistentOrderingError,
    InvalidBoundaryError,
    MalformedRangeOptionsError,
    RangeError,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def one_to_ten():
    """[1, 10]"""
    return make_range(1, 10)


@pytest.fixture
def by_length_options():
    """Опции упорядочивания строк по длине."""
    return {
        "lessThan": lambda a, b: len(a) < len(b),
        "equals": lambda a, b: len(a) == len(b),
    }


# =============================================================================
# MEMBERSHIP
# =============================================================================


class TestMembership:
    """Тесты includes"""

    def test_scenario_closed_range(self, one_to_ten) -> None:
        """[1, 10] включает 1 и 10, но не 11"""
        assert one_to_ten.includes(1)
        assert one_to_ten.includes(10)
        assert not one_to_ten.includes(11)
        assert not one_to_ten.includes(0)

    def test_scenario_open_upper(self) -> None:
        """[1, 10) исключает 10, включает 9.999"""
        r = make_range(1, 10, open_upper_boundary=True)
        assert not r.includes(10)
        assert r.includes(9.999)

    def test_scenario_unbounded_lower(self) -> None:
        """(-inf, 10] включает -1000, но не 11"""
        r = make_range(None, 10)
        assert r.includes(-1000)
        assert not r.includes(11)

    def test_fully_unbounded(self) -> None:
        """Range() включает всё"""
        r = Range()
        assert r.is_unbounded
        assert not r.is_empty
        assert r.includes(-(10**12))
        assert r.includes(10**12)

    def test_contains_operator(self, one_to_ten) -> None:
        """value in range"""
        assert 5 in one_to_ten
        assert 50 not in one_to_ten

    @pytest.mark.parametrize("value", [-5, 0, 1, 5, 10, 11, 100])
    def test_includes_matches_boundary_checks(self, one_to_ten, value) -> None:
        """includes == value_within_lower and value_within_upper"""
        expected = value_within_lower(
            value, one_to_ten.lower, DEFAULT_ORDERING
        ) and value_within_upper(value, one_to_ten.upper, DEFAULT_ORDERING)
        assert one_to_ten.includes(value) is expected

    def test_custom_ordering(self, by_length_options) -> None:
        """Строки, упорядоченные по длине"""
        r = make_range("a", "ccc", by_length_options)
        assert r.includes("zz")
        assert r.includes("xyz")
        assert not r.includes("dddd")
        assert not r.includes("")


# =============================================================================
# EMPTINESS
# =============================================================================


class TestEmptiness:
    """Тесты пустых диапазонов"""

    def test_single_point(self) -> None:
        """[5, 5] включает только 5"""
        r = make_range(5, 5)
        assert not r.is_empty
        assert r.includes(5)
        assert not r.includes(4)
        assert not r.includes(6)

    @pytest.mark.parametrize(
        "options",
        [
            {"open_boundaries": True},
            {"open_lower_boundary": True},
            {"open_upper_boundary": True},
        ],
    )
    def test_open_single_point_is_empty(self, options) -> None:
        """(5, 5), (5, 5], [5, 5) пустые"""
        r = make_range(5, 5, **options)
        assert r.is_empty
        assert not r.includes(5)

    def test_inverted_is_empty(self) -> None:
        """upper < lower → пустой, не ошибка"""
        r = make_range(10, 1)
        assert r.is_empty
        assert not r.includes(5)

    def test_half_unbounded_never_empty(self) -> None:
        """С неограниченной стороной диапазон не пуст"""
        assert not make_range(None, 5, open_upper_boundary=True).is_empty


# =============================================================================
# OPTIONS
# =============================================================================


class TestOptions:
    """Тесты опций построения"""

    def test_camel_case_mapping(self) -> None:
        """camelCase ключи в mapping"""
        r = make_range(1, 10, {"openBoundaries": True})
        assert not r.includes(1)
        assert not r.includes(10)
        assert r.includes(5)

    def test_specific_flag_overrides_open_boundaries(self) -> None:
        """openLowerBoundary/openUpperBoundary перекрывают openBoundaries"""
        r = make_range(1, 10, open_boundaries=True, open_upper_boundary=False)
        assert not r.includes(1)
        assert r.includes(10)

    def test_name_shorthand(self) -> None:
        """Строка вместо опций — имя диапазона"""
        r = make_range(1, 10, "age")
        assert r.name == "age"
        assert str(r) == "age: [1, 10]"

    def test_range_options_instance(self) -> None:
        """RangeOptions принимается как есть"""
        options = RangeOptions(name="limits", open_lower_boundary=True)
        r = make_range(0, 3, options)
        assert r.name == "limits"
        assert r.lower.open is True

    def test_kwargs_override_options(self) -> None:
        """Ключевые аргументы перекрывают options"""
        r = make_range(1, 10, {"name": "a", "openUpperBoundary": True}, name="b")
        assert r.name == "b"
        assert r.upper.open is True

    def test_unknown_keys_ignored(self) -> None:
        """Неизвестные ключи игнорируются"""
        r = make_range(1, 10, {"colour": "red"})
        assert r == make_range(1, 10)

    def test_explicit_ordering(self) -> None:
        """ordering задаётся объектом"""
        ordering = OrderingContext(less_than=lambda a, b: a > b, key="descending")
        r = make_range(10, 1, ordering=ordering)
        assert not r.is_empty
        assert r.includes(5)
        assert r.ordering is ordering

    def test_unbounded_side_ignores_open_flag(self) -> None:
        """open на неограниченной стороне нормализуется"""
        r = make_range(None, 10, open_boundaries=True)
        assert r.lower.open is False
        assert r.upper.open is True


# =============================================================================
# STRING FORM
# =============================================================================


class TestStr:
    """Тесты строкового представления"""

    @pytest.mark.parametrize(
        "r,expected",
        [
            (make_range(1, 10), "[1, 10]"),
            (make_range(1, 10, open_lower_boundary=True), "(1, 10]"),
            (make_range(None, 10, open_upper_boundary=True), "(-inf, 10)"),
            (make_range(0, None), "[0, +inf)"),
            (make_range("a", "z"), "['a', 'z']"),
        ],
    )
    def test_str(self, r, expected) -> None:
        """Интервальная нотация"""
        assert str(r) == expected


# =============================================================================
# IMMUTABILITY & COPIES
# =============================================================================


class TestImmutability:
    """Тесты неизменяемости"""

    def test_frozen(self, one_to_ten) -> None:
        """Поля нельзя присвоить"""
        with pytest.raises(ValidationError):
            one_to_ten.lower = Boundary.closed(0)

    def test_with_upper(self, one_to_ten) -> None:
        """with_upper возвращает копию"""
        narrowed = one_to_ten.with_upper(Boundary.opened(5))
        assert str(narrowed) == "[1, 5)"
        assert str(one_to_ten) == "[1, 10]"

    def test_with_lower(self, one_to_ten) -> None:
        """with_lower возвращает копию"""
        assert str(one_to_ten.with_lower(Boundary.unbounded())) == "(-inf, 10]"

    def test_replace_revalidates(self) -> None:
        """Копия проходит валидацию заново"""
        r = integer_range(1, 10)
        with pytest.raises(InvalidBoundaryError, match="invalid upper boundary 2.5"):
            r.replace(upper=Boundary.closed(2.5))

    def test_to_options(self) -> None:
        """to_options восстанавливает диапазон"""
        r = make_range(1, 10, "x", open_upper_boundary=True)
        options = r.to_options()
        assert options.name == "x"
        assert options.open_lower_boundary is False
        assert options.open_upper_boundary is True
        assert options.ordering is None
        assert make_range(1, 10, options) == r


# =============================================================================
# BOUNDARY INCLUSION
# =============================================================================


class TestBoundaryInclusion:
    """Тесты includes_lower_boundary / includes_upper_boundary"""

    def test_open_boundary_on_equal_open_boundary(self) -> None:
        """(5, ...) начинается внутри (5, 10]"""
        r = make_range(5, 10, open_lower_boundary=True)
        assert r.includes_lower_boundary(5, open=True)
        assert not r.includes_lower_boundary(5)

    def test_closed_boundary_accepts_both_kinds(self) -> None:
        """[5, 10] принимает и [5 и (5"""
        r = make_range(5, 10)
        assert r.includes_lower_boundary(5)
        assert r.includes_lower_boundary(5, open=True)
        assert r.includes_upper_boundary(10)
        assert r.includes_upper_boundary(10, open=True)

    def test_open_upper_boundary(self) -> None:
        """..., 10) заканчивается внутри [5, 10)"""
        r = make_range(5, 10, open_upper_boundary=True)
        assert r.includes_upper_boundary(10, open=True)
        assert not r.includes_upper_boundary(10)

    def test_boundary_past_other_side(self) -> None:
        """Граница за противоположной стороной снаружи"""
        r = make_range(5, 10)
        assert not r.includes_lower_boundary(11)
        assert not r.includes_upper_boundary(4)

    def test_unbounded_boundary(self) -> None:
        """Неограниченная граница внутри только неограниченного диапазона"""
        assert not make_range(5, 10).includes_lower_boundary(None)
        assert make_range(None, 10).includes_lower_boundary(None)
        assert make_range(5, None).includes_upper_boundary(None)


# =============================================================================
# ERRORS
# =============================================================================


class TestConstructionErrors:
    """Тесты ошибок построения"""

    def test_malformed_flag(self) -> None:
        """Флаг открытости не bool"""
        with pytest.raises(MalformedRangeOptionsError, match="Malformed range options") as exc_info:
            make_range(1, 10, {"openLowerBoundary": "yes"})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_malformed_options_type(self) -> None:
        """Опции неподдерживаемого типа"""
        with pytest.raises(MalformedRangeOptionsError, match="must be a mapping"):
            make_range(1, 10, 42)

    def test_blank_name(self) -> None:
        """Имя из пробелов"""
        with pytest.raises(MalformedRangeOptionsError, match="non-blank"):
            make_range(1, 10, "   ")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name_direct(self, name) -> None:
        """Пустое имя отвергается и при прямом построении Range"""
        with pytest.raises(ValidationError, match="non-blank"):
            Range(name=name)

    def test_blank_name_in_replace(self, one_to_ten) -> None:
        """replace тоже проверяет имя"""
        with pytest.raises(ValidationError, match="non-blank"):
            one_to_ten.replace(name="")

    def test_wrong_arity_less_than(self) -> None:
        """lessThan с одним аргументом"""
        with pytest.raises(MalformedRangeOptionsError, match="two positional arguments"):
            make_range(1, 10, less_than=lambda a: True)

    def test_wrong_arity_validator(self) -> None:
        """boundaryValidator с двумя аргументами"""
        with pytest.raises(MalformedRangeOptionsError, match="one positional argument"):
            make_range(1, 10, boundaryValidator=lambda a, b: True)

    def test_ordering_with_less_than(self) -> None:
        """ordering и lessThan взаимоисключающие"""
        with pytest.raises(MalformedRangeOptionsError, match="cannot be combined"):
            make_range(1, 10, ordering=DEFAULT_ORDERING, less_than=lambda a, b: a < b)

    def test_inconsistent_ordering(self) -> None:
        """equals и less_than противоречат друг другу"""
        with pytest.raises(InconsistentOrderingError, match="both equal and ordered"):
            make_range(1, 10, equals=lambda a, b: True)

    def test_validator_rejects_bound(self) -> None:
        """boundaryValidator отвергает границу"""
        with pytest.raises(InvalidBoundaryError, match="evens: invalid lower boundary 3"):
            make_range(3, 10, name="evens", boundary_validator=lambda v: v % 2 == 0)

    def test_errors_share_base(self) -> None:
        """Все ошибки — RangeError"""
        with pytest.raises(RangeError):
            make_range(1, 10, 42)
