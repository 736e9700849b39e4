"""
CLI entry points for haptic-timeline.

Contains the main executable script:
- timeline_cli: reconstruct/expand/trim/compose/info on JSON files
"""

from .timeline_cli import main

__all__ = [
    "main",
]
