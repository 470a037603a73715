"""The ``galleryx`` command-line interface."""
