"""Entrypoints (inbound adapters) for GALLERYX.

Expose the application to the outside world: currently the ``galleryx`` CLI.
Parse raw input into typed values, call the domain through a unit of work, and
present results or error messages.

Dependency rule: may import `galleryx.bootstrap`, `galleryx.domain` and
`galleryx.interfaces`; avoid importing `galleryx.adapters` directly.
"""
