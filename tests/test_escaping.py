from markupsafe import Markup

from src.taxonomies.escaping import (
    FilterHooks,
    checked,
    disabled,
    esc_attr,
    esc_html,
    get_filter_hooks,
    selected,
)


def test_esc_attr_escapes_quotes_and_markup() -> None:
    assert esc_attr('a"b\'c<d>&') == "a&#34;b&#39;c&lt;d&gt;&amp;"
    assert esc_attr(5) == "5"


def test_esc_html_leaves_markup_untouched() -> None:
    safe = Markup("<em>x</em>")
    assert esc_html(safe) == "<em>x</em>"
    assert esc_html("<em>x</em>") == "&lt;em&gt;x&lt;/em&gt;"


def test_boolean_attribute_helpers() -> None:
    assert checked(True) == ' checked="checked"'
    assert selected(True) == ' selected="selected"'
    assert disabled(True) == ' disabled="disabled"'
    assert checked(False) == selected(False) == disabled(False) == ""
    assert isinstance(checked(True), Markup)


def test_filters_run_in_priority_then_registration_order() -> None:
    hooks = FilterHooks()
    hooks.add_filter("term_label", lambda v: v + "-late", priority=20)
    hooks.add_filter("term_label", lambda v: v + "-first")
    hooks.add_filter("term_label", lambda v: v + "-second")
    hooks.add_filter("term_label", lambda v: v + "-early", priority=1)

    assert hooks.apply_filters("term_label", "x") == "x-early-first-second-late"


def test_apply_without_filters_returns_value() -> None:
    assert FilterHooks().apply_filters("term_label", "News") == "News"


def test_remove_filter() -> None:
    hooks = FilterHooks()
    hooks.add_filter("term_label", str.upper)
    assert hooks.has_filter("term_label")

    assert hooks.remove_filter("term_label", str.upper) is True
    assert not hooks.has_filter("term_label")
    assert hooks.remove_filter("term_label", str.upper) is False


def test_clear_single_hook() -> None:
    hooks = FilterHooks()
    hooks.add_filter("term_label", str.upper)
    hooks.add_filter("other", str.lower)
    hooks.clear("term_label")
    assert not hooks.has_filter("term_label")
    assert hooks.has_filter("other")


def test_global_hooks_are_shared() -> None:
    assert get_filter_hooks() is get_filter_hooks()
