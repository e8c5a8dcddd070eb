"""
Category registry.

Loads ``CategorySpec`` objects from config/categories.toml (or a
caller-supplied path) and provides lookup utilities.

Usage
-----
    from weight_analyzer.registry import get_category_spec, list_categories

    spec = get_category_spec("genetic")
    all_specs = list_categories()

The registry is loaded lazily on first access and then cached for the
lifetime of the process.  Passing a different ``categories_path`` reloads.

TOML structure expected in categories.toml
------------------------------------------
    [common]
    parameters = ["age", "gender", ...]

    [categories.<slug>]
    display_name = "Genetic"
    diseases     = ["Cystic Fibrosis", ...]
    parameters   = ["gene_marker_A", ...]
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Optional

from weight_analyzer.models.category import CategorySpec
from weight_analyzer.taxonomy.weight_taxonomy import Category

# ── Module-level cache ────────────────────────────────────────────────────────

_REGISTRY_CACHE: Optional[dict[Category, CategorySpec]] = None
_CACHE_PATH: Optional[str] = None

_PROJECT_ROOT = Path(__file__).parent.parent


def _default_categories_path() -> Path:
    """Return the default path to config/categories.toml."""
    return _PROJECT_ROOT / "config" / "categories.toml"


def _merge_parameters(common: list[str], specific: list[str]) -> tuple[str, ...]:
    """Common parameters first, then category-specific; first occurrence kept."""
    return tuple(dict.fromkeys([*common, *specific]))


def _parse_category(slug: str, raw: dict, common: list[str]) -> CategorySpec:
    """Parse one [categories.<slug>] block into a CategorySpec.

    Raises:
        pydantic.ValidationError: If the slug is not a known ``Category`` or
            a field fails validation.
    """
    return CategorySpec(
        category=slug,
        display_name=raw.get("display_name", slug.title()),
        diseases=tuple(raw.get("diseases", [])),
        parameters=_merge_parameters(common, raw.get("parameters", [])),
    )


def _load_registry(categories_path: Path) -> dict[Category, CategorySpec]:
    """Load and parse categories.toml into a dict of Category -> CategorySpec.

    Raises:
        FileNotFoundError: If categories_path does not exist.
        tomllib.TOMLDecodeError: If the TOML is malformed.
        pydantic.ValidationError: If a block fails validation.
    """
    if not categories_path.exists():
        raise FileNotFoundError(
            f"Category registry file not found: {categories_path}\n"
            "Expected at config/categories.toml.  "
            "Set data.categories_file in default.toml to override."
        )

    with open(categories_path, "rb") as f:
        raw = tomllib.load(f)

    common: list[str] = raw.get("common", {}).get("parameters", [])
    registry: dict[Category, CategorySpec] = {}
    for slug, block in raw.get("categories", {}).items():
        spec = _parse_category(slug, block, common)
        registry[spec.category] = spec

    return registry


def get_registry(
    categories_path: Optional[str] = None,
) -> dict[Category, CategorySpec]:
    """Return the full category registry (cached after first load).

    Args:
        categories_path: Override path to categories.toml.  Relative paths
            are resolved against the project root.
    """
    global _REGISTRY_CACHE, _CACHE_PATH

    if categories_path:
        resolved = Path(categories_path)
        if not resolved.is_absolute():
            resolved = _PROJECT_ROOT / resolved
    else:
        resolved = _default_categories_path()
    resolved_str = str(resolved)

    if _REGISTRY_CACHE is None or _CACHE_PATH != resolved_str:
        _REGISTRY_CACHE = _load_registry(resolved)
        _CACHE_PATH = resolved_str

    return _REGISTRY_CACHE


def get_category_spec(
    category: str,
    categories_path: Optional[str] = None,
) -> CategorySpec:
    """Look up a single category by slug.

    Raises:
        KeyError: If the category is not in the registry.
    """
    registry = get_registry(categories_path)
    key = category.lower()
    for cat, spec in registry.items():
        if cat.value == key:
            return spec
    available = sorted(c.value for c in registry)
    raise KeyError(
        f"Category '{category}' not found in registry.  "
        f"Available categories: {available}"
    )


def list_categories(categories_path: Optional[str] = None) -> list[CategorySpec]:
    """Return all registered categories in file order."""
    return list(get_registry(categories_path).values())


def clear_registry_cache() -> None:
    """Clear the module-level registry cache."""
    global _REGISTRY_CACHE, _CACHE_PATH
    _REGISTRY_CACHE = None
    _CACHE_PATH = None
