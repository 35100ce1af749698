"""Shared utilities for appship core (paths, YAML I/O, merging, subprocess)."""
