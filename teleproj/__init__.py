# teleproj/__init__.py
"""
teleproj: jump between saved project directories by index or name.
"""

__version__ = '0.1.0'
