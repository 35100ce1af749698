"""Shared helpers for appship tests."""
