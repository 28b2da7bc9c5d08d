# textutils/logic/__init__.py

"""Mask tokens, the mask engine, and numeric formatters."""
