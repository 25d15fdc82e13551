"""API routes for taxonomy definitions and checklist rendering.

Admin forms fetch the taxonomy catalog to learn how each single-term
taxonomy is edited, then post the terms and current selection to get
back a ready-to-embed radio checklist or <option> list.
"""

import logging

from fastapi import APIRouter, HTTPException

from src.taxonomies.checklist import render_taxonomy_checklist, render_terms_checklist
from src.taxonomies.registry import get_taxonomy_registry
from src.taxonomies.schemas import (
    DEFAULT_TAXONOMY,
    AdHocChecklistRequest,
    ChecklistRequest,
    ChecklistResponse,
    TaxonomyDefinition,
    TaxonomySummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["taxonomies"])


def _get_or_404(taxonomy_key: str) -> TaxonomyDefinition:
    """Get a taxonomy by key or raise 404."""
    registry = get_taxonomy_registry()
    taxonomy = registry.get(taxonomy_key)
    if taxonomy is None:
        available = registry.list_keys()
        raise HTTPException(
            status_code=404,
            detail=f"Taxonomy '{taxonomy_key}' not found. Available: {available}",
        )
    return taxonomy


# -- List endpoints --


@router.get("/taxonomies", response_model=list[TaxonomySummary])
async def list_taxonomies():
    """List all taxonomy definitions (summaries)."""
    registry = get_taxonomy_registry()
    return registry.list_summaries()


@router.get("/taxonomies/for-object-type/{object_type}", response_model=list[TaxonomySummary])
async def taxonomies_for_object_type(object_type: str):
    """Get active taxonomies attached to a content type."""
    registry = get_taxonomy_registry()
    return [registry.build_summary(t) for t in registry.for_object_type(object_type)]


@router.get("/taxonomies/{taxonomy_key}", response_model=TaxonomyDefinition)
async def get_taxonomy(taxonomy_key: str):
    """Get a full taxonomy definition."""
    return _get_or_404(taxonomy_key)


# -- Render endpoints --


@router.post("/taxonomies/{taxonomy_key}/checklist", response_model=ChecklistResponse)
async def render_checklist(taxonomy_key: str, request: ChecklistRequest):
    """Render a registered taxonomy's terms as its configured input element.

    The response html is an HTML fragment: nested <ul>/<li> radio inputs
    for 'radio' taxonomies, a flat run of <option> elements for 'select'.
    """
    taxonomy = _get_or_404(taxonomy_key)
    html = render_taxonomy_checklist(
        taxonomy,
        request.terms,
        selected_ids=request.selected_ids,
        disabled=request.disabled,
        checked_ontop=request.checked_ontop,
        max_depth=request.max_depth,
    )
    logger.info(
        f"Rendered checklist for {taxonomy_key}: {len(request.terms)} terms, "
        f"{len(request.selected_ids)} selected"
    )
    return ChecklistResponse(
        taxonomy_key=taxonomy.taxonomy_key,
        input_element=taxonomy.input_element,
        hierarchical=taxonomy.hierarchical,
        term_count=len(request.terms),
        html=html,
    )


@router.post("/checklist", response_model=ChecklistResponse)
async def render_ad_hoc_checklist(request: AdHocChecklistRequest):
    """Render terms for a taxonomy that has no registry entry."""
    html = render_terms_checklist(
        request.terms,
        taxonomy=request.taxonomy,
        selected_ids=request.selected_ids,
        input_element=request.input_element,
        hierarchical=request.hierarchical,
        disabled=request.disabled,
        checked_ontop=bool(request.checked_ontop),
        max_depth=request.max_depth,
    )
    return ChecklistResponse(
        taxonomy_key=request.taxonomy or DEFAULT_TAXONOMY,
        input_element=request.input_element,
        hierarchical=request.hierarchical,
        term_count=len(request.terms),
        html=html,
    )
