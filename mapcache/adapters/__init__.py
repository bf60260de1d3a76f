"""Adapters layer - Concrete implementations of ports.

- Caching: MapCache over an injected mapping, plus storage factories
"""
