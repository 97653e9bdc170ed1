"""Core business logic layer.

Subpackages:
- shopping: normalizing, aggregating and pricing a week's shopping list
- budget: estimated vs. actual spend

Everything here is a pure function over in-memory records; storage and
HTTP live in ``mealcart.infra`` and ``mealcart.api``.
"""
__all__ = ["shopping", "budget"]
