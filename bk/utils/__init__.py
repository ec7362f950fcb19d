"""Utility modules for bk.

- output: shared console for standard output
"""
