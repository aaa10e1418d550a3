# src/wall_clock/core/__init__.py
"""Core value type, text conversion and settings."""
