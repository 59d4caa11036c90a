"""Creational patterns: Builder, Factory Method, Singleton."""
