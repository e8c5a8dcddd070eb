"""
Category registry entry model.

A ``CategorySpec`` is one ``[categories.<slug>]`` block of
``config/categories.toml`` after the common parameters have been merged in.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from weight_analyzer.taxonomy.weight_taxonomy import Category


class CategorySpec(BaseModel):
    """Diseases and parameter list for one category.

    Attributes:
        category: Category slug.
        display_name: Human-readable label, e.g. ``"Genetic"``.
        diseases: Disease display names, in registry order.
        parameters: Common parameters followed by category-specific ones,
            duplicates removed, order preserved.
    """

    model_config = ConfigDict(frozen=True)

    category: Category
    display_name: str
    diseases: tuple[str, ...] = ()
    parameters: tuple[str, ...] = ()

    @field_validator("diseases")
    @classmethod
    def validate_unique_diseases(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != len(set(v)):
            raise ValueError("diseases must be unique within a category.")
        return v

    @field_validator("parameters")
    @classmethod
    def validate_unique_parameters(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) != len(set(v)):
            raise ValueError("parameters must be unique within a category.")
        return v
