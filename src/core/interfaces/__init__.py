"""Core interfaces.

Structural contracts (Protocol) implemented by concrete adapters, so the
core depends on abstractions and can be tested with in-memory fakes.
"""
