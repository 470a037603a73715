"""GALLERYX test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Real filesystem and wiring across layers (store, unit of work, bootstrap).
- contract/     : Behaviour every GalleryStore implementation must share.
- e2e/          : The ``galleryx`` command line, driven through click's CliRunner.
- fixtures/     : Factory fixtures for building domain objects.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); use the in-memory store at boundaries.
- Contract parametrizes store implementations to ensure consistent behaviour.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
