"""
HandsFree UI Module

PyQt5 cursor overlay.
"""
from .cursor_overlay import CursorOverlay

__all__ = [
    'CursorOverlay',
]
