"""Adapters (infrastructure) for GALLERYX.

Provide concrete implementations of the application's ports: the XML document
codec, local-file and in-memory gallery stores, and the store-backed unit of work.

Dependency rule: may import `galleryx.domain` and `galleryx.interfaces`; the
domain must not import this package.
"""
