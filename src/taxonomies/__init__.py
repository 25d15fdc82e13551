"""
Taxonomies module for single-term taxonomy checklists.

This module provides:
- Term, RenderArgs and TaxonomyDefinition models
- TermChecklistRenderer for radio checklists and select option lists
- walk_terms(), the depth-first driver that feeds a renderer
- Registry for loading and serving taxonomy definitions
"""

from .schemas import (
    RenderArgs,
    RenderMode,
    TaxonomyDefinition,
    TaxonomySummary,
    Term,
)
from .escaping import FilterHooks, get_filter_hooks
from .renderer import TermChecklistRenderer
from .walker import TreeVisitor, walk_terms
from .checklist import render_taxonomy_checklist, render_terms_checklist
from .registry import TaxonomyRegistry, get_taxonomy_registry

__all__ = [
    "RenderArgs",
    "RenderMode",
    "TaxonomyDefinition",
    "TaxonomySummary",
    "Term",
    "FilterHooks",
    "get_filter_hooks",
    "TermChecklistRenderer",
    "TreeVisitor",
    "walk_terms",
    "render_taxonomy_checklist",
    "render_terms_checklist",
    "TaxonomyRegistry",
    "get_taxonomy_registry",
]
