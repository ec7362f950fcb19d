"""
bk - Bash keyboard shortcut reference
"""

__version__ = "0.1.0"
