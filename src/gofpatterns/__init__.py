"""gof-patterns - Root Package.

This package provides small, runnable demonstrations of classic object-oriented
design patterns. Each demo is a self-contained leaf module with a minimal domain
built solely to illustrate one pattern's structural shape.

Key Components:
    - domain: The pattern demos and the output port they write to
    - application: Demo registry, driving scripts and the demo service
    - infrastructure: Logging and the singleton registry
    - config: Configuration schemas and loading
    - cli: Command-line entry point

Usage:
    >>> gof-patterns demos list
    >>> gof-patterns demos run strategy --format json
"""

from ._version import __version__

__author__ = "gof-patterns contributors"
__package_name__ = "gof-patterns"
