"""Tests for month plan generation."""

import pytest

from meal_calendar.domain.catalog import DEFAULT_CATALOG, Category, FoodCatalog
from meal_calendar.domain.errors import EmptyCategoryError, InvalidMonthError
from meal_calendar.services.planner import (
    day_seed,
    days_in_month,
    generate_month_plan,
    pick,
    seeded_random,
)

SAMPLE = FoodCatalog(
    breakfast=("A", "B"),
    lunch=("C",),
    supper=("D",),
    fruits=("E", "F", "G"),
)


@pytest.mark.parametrize(
    ("year", "month", "expected"),
    [
        (2024, 0, 31),
        (2024, 1, 29),
        (2023, 1, 28),
        (1900, 1, 28),
        (2000, 1, 29),
        (2024, 3, 30),
        (2024, 11, 31),
    ],
)
def test_days_in_month(year: int, month: int, expected: int) -> None:
    assert days_in_month(year, month) == expected


@pytest.mark.parametrize("month", [-1, 12])
def test_month_out_of_range_is_rejected(month: int) -> None:
    with pytest.raises(InvalidMonthError):
        generate_month_plan(2024, month, SAMPLE)


@pytest.mark.parametrize(
    ("seed", "expected"),
    [
        (0, 0.0),
        (1, 0.70984807896456914),
        (20240001, 0.83177591126150219),
        (20241131, 0.45381453891104684),
    ],
)
def test_seeded_random_known_values(seed: int, expected: float) -> None:
    assert seeded_random(seed) == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize(
    ("year", "month", "day", "expected"),
    [
        (2024, 0, 1, ("Uji", "Ugali & Sukuma", "Rice & Vegetables", "Banana")),
        (2024, 0, 2, ("Chapati & Beans", "Rice & Beans", "Mukimo", "Pineapple")),
        (2024, 11, 31, ("Bread & Eggs", "Ugali & Sukuma", "Mukimo", "Orange")),
        (2025, 5, 15, ("Pancakes", "Ugali & Fish", "Ugali & Beef", "Avocado")),
    ],
)
def test_default_catalog_known_picks(
    year: int, month: int, day: int, expected: tuple[str, str, str, str]
) -> None:
    entry = generate_month_plan(year, month, DEFAULT_CATALOG)[day]

    assert (entry.breakfast, entry.lunch, entry.supper, entry.fruit) == expected


def test_seeded_random_stays_in_unit_interval() -> None:
    for seed in range(1, 2000, 7):
        assert 0.0 <= seeded_random(seed) < 1.0


def test_day_seed_layout() -> None:
    assert day_seed(2024, 0, 1) == 20240001
    assert day_seed(2024, 11, 31) == 20241131


def test_pick_returns_none_for_empty_list() -> None:
    assert pick((), 20240001) is None


def test_generation_is_deterministic() -> None:
    first = generate_month_plan(2024, 5, DEFAULT_CATALOG)
    second = generate_month_plan(2024, 5, DEFAULT_CATALOG)

    assert dict(first.days) == dict(second.days)


def test_plan_covers_every_day_of_month() -> None:
    plan = generate_month_plan(2024, 1, DEFAULT_CATALOG)

    assert sorted(plan.days) == list(range(1, 30))
    assert len(plan) == 29
    assert all(plan[day].day == day for day in plan.days)


def test_december_plan_uses_same_year() -> None:
    plan = generate_month_plan(2023, 11, DEFAULT_CATALOG)

    assert len(plan) == 31
    assert plan.year == 2023
    assert plan.month == 11


def test_selections_come_from_catalog() -> None:
    for month in range(12):
        plan = generate_month_plan(2025, month, DEFAULT_CATALOG)
        for entry in plan.days.values():
            for category in Category:
                assert entry.label(category) in DEFAULT_CATALOG.foods(category)


def test_single_option_categories_always_selected() -> None:
    plan = generate_month_plan(2024, 0, SAMPLE)
    day_one = plan[1]

    assert day_one.lunch == "C"
    assert day_one.supper == "D"
    assert day_one.breakfast in {"A", "B"}
    assert day_one.fruit in {"E", "F", "G"}


def test_reordering_changes_selection() -> None:
    reordered = FoodCatalog(
        breakfast=("B", "A"),
        lunch=SAMPLE.lunch,
        supper=SAMPLE.supper,
        fruits=SAMPLE.fruits,
    )

    original = generate_month_plan(2024, 0, SAMPLE)
    swapped = generate_month_plan(2024, 0, reordered)

    for day in original.days:
        assert original[day].breakfast != swapped[day].breakfast


def test_changing_lunch_leaves_other_categories() -> None:
    changed = SAMPLE.add(Category.LUNCH, "Pilau").add(Category.LUNCH, "Githeri")

    original = generate_month_plan(2024, 6, SAMPLE)
    updated = generate_month_plan(2024, 6, changed)

    for day in original.days:
        assert original[day].breakfast == updated[day].breakfast
        assert original[day].supper == updated[day].supper
        assert original[day].fruit == updated[day].fruit


def test_empty_category_is_marked() -> None:
    catalog = FoodCatalog(breakfast=("Porridge",), lunch=("Pilau",), supper=())

    plan = generate_month_plan(2024, 2, catalog)

    assert plan[1].supper is None
    assert plan[1].fruit is None
    assert plan[1].breakfast == "Porridge"
    assert plan.empty_categories == (Category.SUPPER, Category.FRUITS)
    with pytest.raises(EmptyCategoryError) as excinfo:
        plan.ensure_complete()
    assert excinfo.value.category == "supper"


def test_complete_plan_passes_check() -> None:
    plan = generate_month_plan(2024, 2, SAMPLE)

    assert plan.ensure_complete() is plan


def test_generation_does_not_mutate_catalog() -> None:
    before = SAMPLE.to_payload()

    generate_month_plan(2024, 0, SAMPLE)

    assert SAMPLE.to_payload() == before
