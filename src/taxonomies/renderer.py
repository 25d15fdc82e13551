"""Checklist renderer — turns a term tree walk into radio or select markup.

A TermChecklistRenderer is a TreeVisitor: walk_terms() calls its hooks in
depth-first order and the renderer appends fragments to its own buffer.

Radio mode nests <ul class="children"> lists of labelled radio inputs.
Select mode emits a flat run of <option> elements, indenting labels with
&nbsp; to show depth. Level hooks are no-ops in select mode.

Each render pass needs its own renderer (or a reset() between passes);
the buffer is not shared.
"""

import logging
from typing import Optional

from jinja2 import Environment, BaseLoader
from markupsafe import Markup

from .escaping import (
    TERM_LABEL_HOOK,
    FilterHooks,
    checked,
    disabled,
    esc_attr,
    esc_html,
    get_filter_hooks,
    selected,
)
from .schemas import DEFAULT_TAXONOMY, RenderArgs, RenderMode, Term

logger = logging.getLogger(__name__)

DEFAULT_FIELD_NAME = "post_category"
SELECT_OPTION_CLASS = "class-single-term"
SELECT_INDENT = Markup("&nbsp;" * 3)

RADIO_TEMPLATE = (
    '<li id="{{ id }}"><label class="selectit">'
    '<input value="{{ value }}" type="radio" name="{{ name }}" id="in-{{ id }}"'
    "{{ checked }}{{ disabled }} />{{ label }}</label>"
)

SELECT_TEMPLATE = (
    "<option{{ selected }}{{ disabled }}"
    ' id="{{ id }}" value="{{ value }}" class="{{ css_class }}">'
    "{{ pad }}{{ label }}"
)

_env = Environment(loader=BaseLoader(), autoescape=True)
_radio_template = _env.from_string(RADIO_TEMPLATE)
_select_template = _env.from_string(SELECT_TEMPLATE)


def field_name(taxonomy: str, hierarchical: bool) -> str:
    """Form field name for a taxonomy's checklist inputs."""
    taxonomy = taxonomy or DEFAULT_TAXONOMY
    if taxonomy == DEFAULT_TAXONOMY:
        name = DEFAULT_FIELD_NAME
    else:
        name = f"tax_input[{taxonomy}]"
    return f"{name}[]" if hierarchical else name


def element_id(taxonomy: str, term_id: int) -> str:
    """Element id shared by a term's list item/option and its input."""
    return f"{taxonomy or DEFAULT_TAXONOMY}-{term_id}"


class TermChecklistRenderer:
    """Visitor that renders a term tree as a radio checklist or select options.

    Usage:
        renderer = TermChecklistRenderer(hierarchical=True, input_element=RenderMode.RADIO)
        walk_terms(terms, renderer, RenderArgs(taxonomy="genre", selected_ids={5}))
        html = renderer.getvalue()
    """

    def __init__(
        self,
        hierarchical: bool,
        input_element: RenderMode,
        hooks: Optional[FilterHooks] = None,
    ):
        self._hierarchical = bool(hierarchical)
        self._input_element = RenderMode(input_element)
        self._hooks = hooks
        self._output: list[str] = []

    @property
    def hierarchical(self) -> bool:
        return self._hierarchical

    @property
    def input_element(self) -> RenderMode:
        return self._input_element

    @property
    def is_radio(self) -> bool:
        return self._input_element == RenderMode.RADIO

    # -- Buffer --

    def getvalue(self) -> str:
        """Return everything rendered so far."""
        return "".join(self._output)

    def reset(self) -> None:
        """Clear the buffer for another pass."""
        self._output.clear()

    # -- Walker hooks --

    def on_level_start(self, depth: int) -> None:
        if self.is_radio:
            self._output.append("\t" * depth + '<ul class="children">\n')

    def on_level_end(self, depth: int) -> None:
        if self.is_radio:
            self._output.append("\t" * depth + "</ul>\n")

    def on_node_start(self, term: Term, depth: int, args: RenderArgs) -> None:
        taxonomy = args.effective_taxonomy
        value = term.id if self._hierarchical else term.slug
        in_selected = term.id in args.selected_ids

        hooks = self._hooks if self._hooks is not None else get_filter_hooks()
        label = hooks.apply_filters(TERM_LABEL_HOOK, term.name)

        context = {
            "id": esc_attr(element_id(taxonomy, term.id)),
            "name": esc_attr(field_name(taxonomy, self._hierarchical)),
            "value": esc_attr(value),
            "label": esc_html(label),
            "disabled": disabled(args.disabled),
        }

        if self.is_radio:
            fragment = self._start_radio(context, in_selected)
        else:
            fragment = self._start_select(context, in_selected, depth)
        self._output.append("\n" + fragment)

    def on_node_end(self, term: Term, depth: int) -> None:
        if self.is_radio:
            self._output.append("</li>\n")
        else:
            self._output.append("</option>\n")

    # -- Fragment builders --

    @staticmethod
    def _start_radio(context: dict, in_selected: bool) -> str:
        """Opening <li> with a labelled radio input; the <li> stays open for children."""
        return _radio_template.render(checked=checked(in_selected), **context)

    @staticmethod
    def _start_select(context: dict, in_selected: bool, depth: int) -> str:
        """Opening <option> with its label indented by depth."""
        return _select_template.render(
            selected=selected(in_selected),
            css_class=SELECT_OPTION_CLASS,
            pad=SELECT_INDENT * max(depth, 0),
            **context,
        )
