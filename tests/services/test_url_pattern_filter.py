import pytest

from crawlgate.domain.fetched_resource import FetchedResource
from crawlgate.exceptions import FilterConfigError
from crawlgate.services.url_pattern_filter import UrlPatternFilter


def test_matching_url_is_filtered_with_pattern_in_reason():
    f = UrlPatternFilter([r"/logout", r"\.pdf$"])
    result = f.filtered(FetchedResource("http://example.com/docs/a.pdf", 200))
    assert result.is_filtered
    assert result.reason == r"matches exclusion pattern: \.pdf$"


def test_non_matching_url_is_not_filtered():
    f = UrlPatternFilter([r"/logout"])
    assert not f.filtered(FetchedResource("http://example.com/login", 200)).is_filtered


def test_ignore_case():
    f = UrlPatternFilter([r"/LOGOUT"], ignore_case=True)
    assert f.filtered(FetchedResource("http://example.com/logout", 200)).is_filtered


def test_invalid_pattern_rejected_at_construction():
    with pytest.raises(FilterConfigError):
        UrlPatternFilter(["(unclosed"])


def test_no_patterns_never_filters():
    assert not UrlPatternFilter([]).filtered(FetchedResource("http://example.com", 200)).is_filtered
