"""Structural patterns: Adapter, Bridge, Decorator."""
