"""
Habit Lists
Track daily habits and keep simple checklists, served as a small JSON API.
"""

__version__ = "1.0.0"
