"""Filesystem helpers: discovery, path canonicalization, companion reads."""
