"""Core interfaces.

Protocols implemented by concrete adapters; the core depends on these
abstractions, never on `subprocess` directly.
"""
