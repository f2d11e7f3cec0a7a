# teleproj/__main__.py
"""
Entry point for teleproj.
"""
from teleproj.cli import app

if __name__ == "__main__":
    app()
