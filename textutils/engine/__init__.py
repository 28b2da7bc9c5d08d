# textutils/engine/__init__.py

"""Engine package providing scanners, recognizers, and the entity matcher.

This package contains the components that locate linkable entities in text
and annotate them with positions and link targets.
"""
