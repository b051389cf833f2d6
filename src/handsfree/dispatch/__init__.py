"""
HandsFree Dispatch Module

Synthetic pointer input for recognized actions.
"""
from .pointer import PointerDispatcher, ScreenMapper

__all__ = [
    'PointerDispatcher',
    'ScreenMapper',
]
