"""Tests PageDescriptor — builder, accesseurs, FeatureNotEnabled, prédicats."""
import itertools
from datetime import timedelta

import pytest
from pydantic import BaseModel, ValidationError

from page_strategies import PageDescriptor, FeatureNotEnabled


class Post(BaseModel):
    slug: str
    title: str = ""


def _posts():
    return ["/blog/a", "/blog/b"]


def _post_for(path: str) -> Post:
    return Post(slug=path.rsplit("/", 1)[-1], title=f"Post {path}")


# ── new() ─────────────────────────────────────────────────────────────────────

def test_new_is_basic():
    page = PageDescriptor[Post].new("/blog")
    assert page.path == "/blog"
    assert page.is_basic() is True


def test_new_renders_empty_output():
    page = PageDescriptor[Post].new("/blog")
    assert page.render(None) == ""
    assert page.render() == ""


def test_new_empty_path_rejected():
    with pytest.raises(ValidationError):
        PageDescriptor.new("")


# ── Builder ───────────────────────────────────────────────────────────────────

def test_with_template_replaces():
    page = (
        PageDescriptor[Post].new("/blog")
        .with_template(lambda p: "premier")
        .with_template(lambda p: f"<h1>{p.title if p else 'vide'}</h1>")
    )
    assert page.render() == "<h1>vide</h1>"
    assert page.render(Post(slug="a", title="Hello")) == "<h1>Hello</h1>"


def test_builder_returns_new_copy():
    base = PageDescriptor[Post].new("/blog")
    configured = base.with_build_paths(_posts)
    assert base.uses_build_paths() is False
    assert configured.uses_build_paths() is True


def test_builder_order_independent():
    check = lambda: True  # noqa: E731
    a = (
        PageDescriptor[Post].new("/blog")
        .with_build_paths(_posts)
        .with_build_state(_post_for)
        .with_revalidate_check(check)
        .with_incremental(True)
    )
    b = (
        PageDescriptor[Post].new("/blog")
        .with_incremental(True)
        .with_revalidate_check(check)
        .with_build_state(_post_for)
        .with_build_paths(_posts)
    )
    assert a == b


def test_builder_last_write_wins():
    page = (
        PageDescriptor.new("/blog")
        .with_incremental(True)
        .with_revalidate_after("1h")
        .with_incremental(False)
        .with_revalidate_after("2d")
    )
    assert page.uses_incremental() is False
    assert page.revalidate_after == timedelta(days=2)


def test_published_descriptor_is_frozen():
    page = PageDescriptor.new("/blog")
    with pytest.raises(ValidationError):
        page.path = "/autre"


def test_non_callable_hook_rejected():
    with pytest.raises(ValidationError):
        PageDescriptor.new("/blog").with_build_paths(["/blog/a"])


# ── Accesseurs ────────────────────────────────────────────────────────────────

def test_get_build_paths_not_enabled():
    page = PageDescriptor.new("/blog")
    with pytest.raises(FeatureNotEnabled) as exc:
        page.get_build_paths()
    assert exc.value.path == "/blog"
    assert exc.value.feature == "build_paths"


def test_get_build_paths_returns_hook_output():
    page = PageDescriptor.new("/blog").with_build_paths(_posts)
    assert page.uses_build_paths() is True
    assert page.get_build_paths() == ["/blog/a", "/blog/b"]


def test_build_paths_without_build_state():
    page = PageDescriptor[Post].new("/blog").with_build_paths(_posts)
    with pytest.raises(FeatureNotEnabled) as exc:
        page.get_build_state("/blog/a")
    assert (exc.value.path, exc.value.feature) == ("/blog", "build_state")


def test_build_state_on_root_path():
    page = PageDescriptor[Post].new("/blog").with_build_state(_post_for)
    assert page.uses_build_paths() is False
    props = page.get_build_state("/blog")
    assert props == Post(slug="blog", title="Post /blog")


def test_get_request_state_not_enabled():
    page = PageDescriptor.new("/blog")
    with pytest.raises(FeatureNotEnabled, match="request_state"):
        page.get_request_state("/blog")


def test_get_request_state_passes_concrete_path():
    seen = []

    def request_state(path):
        seen.append(path)
        return Post(slug="live")

    page = PageDescriptor[Post].new("/blog").with_request_state(request_state)
    assert page.get_request_state("/blog/x").slug == "live"
    assert seen == ["/blog/x"]


def test_should_revalidate_not_enabled():
    page = PageDescriptor.new("/blog").with_revalidate_after("1h")
    with pytest.raises(FeatureNotEnabled, match="revalidate_check"):
        page.should_revalidate()


def test_feature_not_enabled_message():
    err = FeatureNotEnabled("/blog", "build_state")
    assert "build_state" in str(err)
    assert "/blog" in str(err)


def test_render_does_not_consult_capabilities():
    def boom(path):
        raise AssertionError("ne doit pas être appelé")

    page = (
        PageDescriptor[Post].new("/blog")
        .with_build_state(boom)
        .with_request_state(boom)
        .with_template(lambda p: "ok")
    )
    assert page.render() == "ok"


# ── Prédicats ─────────────────────────────────────────────────────────────────

def test_revalidates_with_check_only():
    assert PageDescriptor.new("/").with_revalidate_check(lambda: False).revalidates() is True


def test_revalidates_with_interval_only():
    assert PageDescriptor.new("/").with_revalidate_after("1h").revalidates() is True


def test_revalidates_false_by_default():
    assert PageDescriptor.new("/").revalidates() is False


def test_with_revalidate_after_invalid():
    with pytest.raises(ValidationError):
        PageDescriptor.new("/").with_revalidate_after("bientôt")


_CONFIGURATORS = {
    "build_paths":   lambda p: p.with_build_paths(_posts),
    "build_state":   lambda p: p.with_build_state(_post_for),
    "request_state": lambda p: p.with_request_state(_post_for),
    "check":         lambda p: p.with_revalidate_check(lambda: True),
    "after":         lambda p: p.with_revalidate_after("10m"),
    "incremental":   lambda p: p.with_incremental(True),
}


@pytest.mark.parametrize("enabled", [
    combo
    for n in range(len(_CONFIGURATORS) + 1)
    for combo in itertools.combinations(_CONFIGURATORS, n)
])
def test_is_basic_iff_nothing_enabled(enabled):
    page = PageDescriptor[Post].new("/blog")
    for name in enabled:
        page = _CONFIGURATORS[name](page)

    others = [
        page.uses_build_paths(),
        page.uses_build_state(),
        page.uses_request_state(),
        page.revalidates(),
        page.uses_incremental(),
    ]
    assert page.is_basic() == (not any(others))
    assert page.is_basic() == (len(enabled) == 0)


def test_incremental_false_keeps_basic():
    assert PageDescriptor.new("/").with_incremental(False).is_basic() is True
