"""
Habit Calendar - Source Package

A small habit tracker: add named habits, tick off days on a month
grid, move between months. The whole state is one JSON document.

DESIGN PRINCIPLES:
1. One document, rewritten whole after every change
2. Unreadable data degrades to an empty tracker, never a crash
3. Interactions are command values, handled in one place
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Habit Calendar Team"
