# textutils/service/__init__.py

"""Facade, settings, and the default service instance."""
