"""Interfaces (application boundary) for GALLERYX.

Defines framework-free application contracts: ABCs and small errors shared by
the adapters, bootstrap and entrypoints (gallery stores, units of work).
Business rules stay out of this package.

Dependency rule: may import `galleryx.domain` for type hints only; must not
import `galleryx.adapters` or `galleryx.entrypoints`.
"""
