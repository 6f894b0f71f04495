"""Core business logic layer.

Subpackages:
- shopping: catalog matching, packaging, consolidation and shopping list assembly
- reporting: nutrition targets and plan calorie totals
- planning: meal plan validation and the fallback plan
"""
__all__ = ["shopping", "reporting", "planning"]
