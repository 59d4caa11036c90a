"""Singleton registry and lazy initialization tests package."""
