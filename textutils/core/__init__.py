# textutils/core/__init__.py

"""Core domain models and utilities used across the text utilities.

This package provides domain types, option models, exceptions, and the
pattern table loader shared by the matcher and mask engines.
"""
