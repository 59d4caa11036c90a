"""Domain layer - the pattern demos and the ports they depend on.

Demos are grouped the way the patterns are usually catalogued:
    - structural: Adapter, Bridge, Decorator
    - creational: Builder, Factory Method, Singleton
    - behavioural: Command, Strategy

No demo depends on another; each module can be read on its own.
"""
