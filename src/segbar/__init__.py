"""
segbar: output constructors for status bar segments.
"""

__version__ = "0.1.0"
