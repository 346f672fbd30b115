"""Tests PageRegistry — enregistrement, doublons, correspondance de chemins."""
import pytest

from page_strategies import PageDescriptor, PageRegistry


@pytest.fixture
def registry():
    r = PageRegistry()
    r.add(PageDescriptor.new("/"))
    r.add(PageDescriptor.new("/blog"))
    r.add(PageDescriptor.new("/blog/tags"))
    return r


def test_duplicate_root_rejected(registry):
    with pytest.raises(ValueError, match="déjà enregistré"):
        registry.add(PageDescriptor.new("/blog"))


def test_get_and_contains(registry):
    assert registry.get("/blog").path == "/blog"
    assert registry.get("/absent") is None
    assert "/blog" in registry
    assert len(registry) == 3


def test_match_longest_prefix(registry):
    assert registry.match("/blog/tags/python").path == "/blog/tags"
    assert registry.match("/blog/post").path == "/blog"
    assert registry.match("/blog").path == "/blog"


def test_match_segment_boundary(registry):
    assert registry.match("/blogroll").path == "/"


def test_match_none_without_root():
    r = PageRegistry()
    r.add(PageDescriptor.new("/blog"))
    assert r.match("/shop") is None


def test_iteration_order(registry):
    assert [p.path for p in registry] == ["/", "/blog", "/blog/tags"]
