"""Infrastructure layer - logging and shared technical patterns."""
