"""Checklist facade — one complete render pass over a list of terms.

Builds the render context, walks the tree with a fresh renderer and
returns the fragment. With checked_ontop, selected terms are pulled out
and rendered as their own tree ahead of the remaining terms.
"""

import logging
from typing import Iterable, Optional

from .escaping import FilterHooks
from .renderer import TermChecklistRenderer
from .schemas import RenderArgs, RenderMode, TaxonomyDefinition, Term
from .walker import walk_terms

logger = logging.getLogger(__name__)


def render_terms_checklist(
    terms: Iterable[Term],
    *,
    taxonomy: str = "",
    selected_ids: Iterable[int] = (),
    input_element: RenderMode = RenderMode.RADIO,
    hierarchical: bool = True,
    disabled: bool = False,
    checked_ontop: bool = False,
    max_depth: int = 0,
    hooks: Optional[FilterHooks] = None,
) -> str:
    """Render terms as a radio checklist or a run of select options.

    Args:
        terms: Terms in display order.
        taxonomy: Taxonomy name; empty means 'category'.
        selected_ids: Ids of the currently selected terms.
        input_element: RenderMode.RADIO or RenderMode.SELECT.
        hierarchical: Submit term ids (True) or slugs (False).
        disabled: Render every input disabled.
        checked_ontop: Render selected terms first, nested among themselves.
        max_depth: 0 = unlimited, -1 = flat, N > 0 = at most N levels.
        hooks: Label filters (default: global hooks).

    Returns:
        The HTML fragment.
    """
    terms = list(terms)
    args = RenderArgs(
        taxonomy=taxonomy,
        selected_ids=frozenset(selected_ids),
        disabled=disabled,
    )
    renderer = TermChecklistRenderer(hierarchical, input_element, hooks=hooks)

    if checked_ontop and args.selected_ids:
        on_top = [t for t in terms if t.id in args.selected_ids]
        rest = [t for t in terms if t.id not in args.selected_ids]
        walk_terms(on_top, renderer, args, max_depth=0)
        walk_terms(rest, renderer, args, max_depth=max_depth)
    else:
        walk_terms(terms, renderer, args, max_depth=max_depth)

    html = renderer.getvalue()
    logger.debug(
        f"Rendered {len(terms)} terms for '{args.effective_taxonomy}' "
        f"as {renderer.input_element.value} ({len(html)} chars)"
    )
    return html


def render_taxonomy_checklist(
    definition: TaxonomyDefinition,
    terms: Iterable[Term],
    *,
    selected_ids: Iterable[int] = (),
    disabled: bool = False,
    checked_ontop: Optional[bool] = None,
    max_depth: int = 0,
    hooks: Optional[FilterHooks] = None,
) -> str:
    """Render terms using a registered taxonomy's mode and hierarchy settings."""
    if checked_ontop is None:
        checked_ontop = definition.checked_ontop
    return render_terms_checklist(
        terms,
        taxonomy=definition.taxonomy_key,
        selected_ids=selected_ids,
        input_element=definition.input_element,
        hierarchical=definition.hierarchical,
        disabled=disabled,
        checked_ontop=checked_ontop,
        max_depth=max_depth,
        hooks=hooks,
    )
