"""Internal helpers for md2html."""
