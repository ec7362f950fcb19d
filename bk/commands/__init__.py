"""Command implementations behind the bk CLI flags."""
