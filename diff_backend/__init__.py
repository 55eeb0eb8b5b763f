"""Diff Backend - line diff engine and preview API for collaborative editing"""

__version__ = "1.0.0"
