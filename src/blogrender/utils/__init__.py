#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared helpers for dependency checks, escaping and path safety."""
