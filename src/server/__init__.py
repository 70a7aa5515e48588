"""HTTP API for md2html."""
