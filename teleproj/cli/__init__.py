# teleproj/cli/__init__.py
"""
Command-line interface for teleproj.
"""
from teleproj.cli.main import app

__all__ = ['app']
