import dataclasses

import pytest

from crawlgate.domain.filter_result import FilterResult
from crawlgate.exceptions import InvalidFilterResultError


def test_not_filtered_constant_has_empty_reason():
    assert FilterResult.NOT_FILTERED.is_filtered is False
    assert FilterResult.NOT_FILTERED.reason == ""


def test_filtered_constant_has_empty_reason():
    assert FilterResult.FILTERED.is_filtered is True
    assert FilterResult.FILTERED.reason == ""


@pytest.mark.parametrize("reason", ["", "binary content-type", "matches exclusion pattern: /logout"])
def test_filtered_because_keeps_reason(reason):
    result = FilterResult.filtered_because(reason)
    assert result.is_filtered is True
    assert result.reason == reason


def test_filtered_because_none_raises_invalid_argument():
    with pytest.raises(InvalidFilterResultError):
        FilterResult.filtered_because(None)


def test_not_filtered_none_raises_invalid_argument():
    with pytest.raises(InvalidFilterResultError):
        FilterResult.not_filtered(None)


def test_constructor_rejects_none_reason():
    with pytest.raises(ValueError):
        FilterResult(False, None)


def test_results_are_immutable():
    result = FilterResult.filtered_because("too big")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.reason = "other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.is_filtered = False


def test_results_compare_by_value():
    assert FilterResult.filtered_because("") == FilterResult.FILTERED
    assert FilterResult.not_filtered() == FilterResult.NOT_FILTERED
    assert FilterResult.filtered_because("a") != FilterResult.filtered_because("b")
