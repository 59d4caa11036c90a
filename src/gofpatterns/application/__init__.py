"""Application layer - demo registry, driving scripts and the demo service."""
