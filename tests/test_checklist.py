import re

from src.taxonomies.checklist import render_taxonomy_checklist, render_terms_checklist
from src.taxonomies.escaping import FilterHooks, get_filter_hooks
from src.taxonomies.schemas import RenderMode, TaxonomyDefinition


def _ids(html: str, taxonomy: str) -> list[int]:
    return [int(i) for i in re.findall(rf'<(?:li|option)[^>]* id="{taxonomy}-(\d+)"', html)]


def test_renders_radio_tree_by_default(news_tree, check_nesting) -> None:
    html = render_terms_checklist(news_tree, selected_ids=[3])

    assert check_nesting(html).errors == []
    assert _ids(html, "category") == [1, 2, 3, 4, 5]
    assert html.count('checked="checked"') == 1
    assert 'id="in-category-3" checked="checked"' in html


def test_select_mode_with_slugs(news_tree) -> None:
    html = render_terms_checklist(
        news_tree,
        taxonomy="genre",
        input_element=RenderMode.SELECT,
        hierarchical=False,
    )
    assert 'value="europe"' in html
    assert ">" + "&nbsp;" * 6 + "Europe</option>" in html


def test_checked_ontop_moves_selected_first(news_tree) -> None:
    html = render_terms_checklist(
        news_tree,
        taxonomy="genre",
        selected_ids=[4],
        input_element=RenderMode.SELECT,
        checked_ontop=True,
    )
    assert _ids(html, "genre") == [4, 1, 2, 3, 5]
    # The pulled-up term is shown at the top level
    assert 'id="genre-4" value="4" class="class-single-term">Europe' in html


def test_checked_ontop_orphans_children_of_selected_parent(news_tree, check_nesting) -> None:
    html = render_terms_checklist(
        news_tree,
        taxonomy="genre",
        selected_ids=[3],
        checked_ontop=True,
    )
    assert check_nesting(html).errors == []
    assert _ids(html, "genre") == [3, 1, 2, 5, 4]


def test_checked_ontop_keeps_selected_parent_and_child_nested(news_tree, check_nesting) -> None:
    html = render_terms_checklist(
        news_tree,
        taxonomy="genre",
        selected_ids=[3, 4],
        checked_ontop=True,
    )
    assert check_nesting(html).errors == []
    assert _ids(html, "genre") == [3, 4, 1, 2, 5]
    # Europe sits in a child list under World, ahead of the rest of the tree
    head = html[: html.index('id="genre-1"')]
    assert head.count('<ul class="children">') == 1
    assert head.index('id="genre-3"') < head.index("<ul") < head.index('id="genre-4"')


def test_checked_ontop_without_selection_is_plain_tree(news_tree) -> None:
    plain = render_terms_checklist(news_tree, taxonomy="genre")
    on_top = render_terms_checklist(news_tree, taxonomy="genre", checked_ontop=True)
    assert plain == on_top


def test_disabled_marks_every_input(news_tree) -> None:
    html = render_terms_checklist(news_tree, disabled=True)
    assert html.count('disabled="disabled"') == len(news_tree)


def test_max_depth_limits_levels(news_tree) -> None:
    html = render_terms_checklist(news_tree, max_depth=1)
    assert _ids(html, "category") == [1, 5]
    assert "<ul" not in html


def test_explicit_hooks_override_global(news_tree) -> None:
    get_filter_hooks().add_filter("term_label", lambda v: "global")
    hooks = FilterHooks()
    hooks.add_filter("term_label", str.upper)

    html = render_terms_checklist(news_tree[:1], hooks=hooks)
    assert "NEWS</label>" in html

    html = render_terms_checklist(news_tree[:1])
    assert "global</label>" in html


def test_render_taxonomy_checklist_uses_definition(news_tree) -> None:
    definition = TaxonomyDefinition(
        taxonomy_key="region",
        label="Region",
        hierarchical=False,
        input_element=RenderMode.SELECT,
        checked_ontop=True,
    )
    html = render_taxonomy_checklist(definition, news_tree, selected_ids=[5])

    assert _ids(html, "region") == [5, 1, 2, 3, 4]
    assert '<option selected="selected" id="region-5" value="sports"' in html

    html = render_taxonomy_checklist(
        definition, news_tree, selected_ids=[5], checked_ontop=False
    )
    assert _ids(html, "region") == [1, 2, 3, 4, 5]
