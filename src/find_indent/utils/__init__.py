"""Shared utilities for find_indent."""
