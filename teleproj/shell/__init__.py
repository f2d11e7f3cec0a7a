# teleproj/shell/__init__.py
"""
Shell integration for teleproj.
"""
from .integration import render_shell_init, SHELL_TEMPLATES

__all__ = ['render_shell_init', 'SHELL_TEMPLATES']
