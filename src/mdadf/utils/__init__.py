"""Utility helpers for mdadf."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
