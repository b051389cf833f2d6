"""
HandsFree - hand-tracked pointer control.
"""
__version__ = "0.1.0"
