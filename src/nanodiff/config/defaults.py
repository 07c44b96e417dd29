"""Starter .nanodiff.toml template."""

DEFAULT_TOML = """\
# nanodiff configuration
version = "1.0"

[diff]
mode = "streaming"        # streaming | eager
full_context = false      # also print aligned lines before the first difference
encoding = "utf-8"
missing_as_empty = false  # treat a nonexistent file as an empty document

[output]
format = "unified"        # unified | terminal | json
show_context = true
show_header = false
show_summary = false

[exit]
on_diff = 1
"""
