"""Bundled data files for molt (default theme)."""
