"""HTTP API layer for Inkpost Core."""
