"""Behavioural patterns: Command, Strategy."""
