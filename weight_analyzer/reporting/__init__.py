"""
Reporting: file exports and ASCII terminal output for analyses.

Modules
-------
export     : export_to_json() + export_to_csv() + export_to_parquet()
             + flatten_analyses_for_export().
formatters : format_analysis_table() + format_category_summary()
             + format_prediction(), all plain strings for typer.echo().
"""
