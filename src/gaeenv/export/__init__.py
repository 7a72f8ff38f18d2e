# src/gaeenv/export/__init__.py
"""Renderização das variáveis resolvidas como linhas `export`."""

from .exporter import format_export, render_exports, shell_quote, write_exports

__all__ = ["format_export", "render_exports", "shell_quote", "write_exports"]
