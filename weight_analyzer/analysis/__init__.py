"""
Analysis layer: turns engine output into per-disease aggregates.

Modules
-------
builder : slugify() + build_analysis() + analyze_category()
          + filter_analyses() + summarize_category().
"""
