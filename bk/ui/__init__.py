"""Terminal rendering for bk.

- table: category sections rendered as aligned, word-wrapped Rich tables
"""
