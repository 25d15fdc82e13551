"""Taxonomy Checklist - single-term taxonomy inputs for admin forms.

This service renders taxonomy terms as form inputs:
- Nested radio checklists for hierarchical taxonomies
- Indented select option lists
- Taxonomy definitions (input element, hierarchy, layout)
"""

__version__ = "0.1.0"
