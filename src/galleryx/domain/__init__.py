"""Domain layer for GALLERYX.

Contains business rules: the Gallery aggregate, its entities (artists, artworks,
customers, orders), value objects, and domain errors. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `galleryx.adapters` or `galleryx.entrypoints`.
"""
