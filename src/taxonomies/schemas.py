"""Taxonomy schemas — data models for terms, render context and taxonomy definitions.

Terms are owned by the host's term source and are read-only here.
RenderArgs carries the per-pass context a tree walker hands to the
checklist renderer. TaxonomyDefinitions describe single-term taxonomies
and how their admin input is drawn.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_TAXONOMY = "category"


class RenderMode(str, Enum):
    """Output shape of a checklist render pass."""
    RADIO = "radio"
    SELECT = "select"


class Term(BaseModel):
    """A node in a parent-linked taxonomy tree."""

    model_config = ConfigDict(frozen=True)

    id: int
    parent: Optional[int] = Field(
        default=None,
        description="Parent term id; None or 0 for a root term",
    )
    slug: str
    name: str


class RenderArgs(BaseModel):
    """Per-pass context supplied by the tree walker to every node callback."""

    model_config = ConfigDict(frozen=True)

    taxonomy: str = Field(
        default="",
        description="Target taxonomy name; empty means 'category'",
    )
    selected_ids: frozenset[int] = Field(
        default_factory=frozenset,
        description="Ids of the currently selected terms",
    )
    disabled: bool = Field(
        default=False,
        description="True when the surrounding form is not editable",
    )

    @property
    def effective_taxonomy(self) -> str:
        return self.taxonomy or DEFAULT_TAXONOMY


# -- Taxonomy definitions --


class TaxonomyDefinition(BaseModel):
    """A single-term taxonomy and the input element used to edit it."""

    taxonomy_key: str = Field(
        ...,
        description="Unique identifier (snake_case, e.g. 'genre', 'priority')",
    )
    label: str = Field(
        ...,
        description="Human-readable name shown above the input",
    )
    description: str = ""
    hierarchical: bool = Field(
        default=True,
        description="Submit term ids (True) or term slugs (False)",
    )
    input_element: RenderMode = Field(
        default=RenderMode.RADIO,
        description="'radio' for a nested checklist, 'select' for an indented option list",
    )
    checked_ontop: bool = Field(
        default=False,
        description="Render selected terms first, ahead of the tree",
    )
    object_types: list[str] = Field(
        default_factory=lambda: ["post"],
        description="Content types this taxonomy is attached to",
    )

    # Metadata
    status: str = Field(
        default="active",
        description="'active', 'draft', 'deprecated'",
    )
    tags: list[str] = Field(default_factory=list)


class TaxonomySummary(BaseModel):
    """Lightweight summary for listing endpoints."""

    taxonomy_key: str
    label: str
    description: str = ""
    hierarchical: bool = True
    input_element: RenderMode = RenderMode.RADIO
    object_types: list[str] = Field(default_factory=list)
    status: str = "active"


# -- Checklist render request/response --


class ChecklistRequest(BaseModel):
    """Terms and selection state for rendering a registered taxonomy."""

    terms: list[Term] = Field(default_factory=list)
    selected_ids: list[int] = Field(default_factory=list)
    disabled: bool = False
    checked_ontop: Optional[bool] = Field(
        default=None,
        description="Override the taxonomy's checked_ontop setting",
    )
    max_depth: int = Field(
        default=0,
        description="0 = unlimited, -1 = flat, N = at most N levels",
    )


class AdHocChecklistRequest(ChecklistRequest):
    """Checklist request for a taxonomy that is not in the registry."""

    taxonomy: str = ""
    input_element: RenderMode = RenderMode.RADIO
    hierarchical: bool = True


class ChecklistResponse(BaseModel):
    """Rendered checklist fragment."""

    taxonomy_key: str
    input_element: RenderMode
    hierarchical: bool
    term_count: int
    html: str
