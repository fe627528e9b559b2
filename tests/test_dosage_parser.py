import pytest

from stockcare.services.dosage_parser import calculate_daily_doses, parse_dosage_pattern


@pytest.mark.parametrize("pattern, expected", [
    ("1-0-1-0", 2),
    ("1-0-1", 2),
    (" 1 - 0 - 1 - 0 ", 2),
    ("0.5-0-0.5-0", 1),
    ("2-1-1-1", 5),
])
def test_hyphenated_patterns_sum_each_slot(pattern, expected):
    result = parse_dosage_pattern(pattern)
    assert result.parsed
    assert result.daily_doses == expected
    assert result.usage_known


def test_invalid_segments_count_as_zero():
    result = parse_dosage_pattern("1-x-1-")
    assert result.parsed
    assert result.daily_doses == 2


def test_free_text_sums_embedded_numbers():
    # Cada número se suma, igual que en el inventario original
    assert calculate_daily_doses("1 cada 8 horas") == 9
    assert calculate_daily_doses("2 tabletas") == 2
    assert calculate_daily_doses("0.5 tableta") == 0.5


@pytest.mark.parametrize("pattern", ["", None, "PRN", "según necesidad", "x-y", 12])
def test_unparseable_patterns_are_unknown_usage(pattern):
    result = parse_dosage_pattern(pattern)
    assert result.daily_doses == 0
    assert not result.parsed
    assert not result.usage_known


def test_zero_pattern_parses_but_usage_is_unknown():
    result = parse_dosage_pattern("0-0-0-0")
    assert result.parsed
    assert result.daily_doses == 0
    assert not result.usage_known


def test_empty_and_none_are_equivalent():
    assert parse_dosage_pattern("") == parse_dosage_pattern(None)
