# -*- coding: utf-8 -*-
"""
projxform Exception Hierarchy - Domain-specific exceptions for reprojection.

Provides a small exception hierarchy that lets downstream consumers (e.g.,
a rendering pipeline) catch projxform-specific errors distinctly from
Python built-in exceptions. All projxform exceptions subclass both
``ProjxformError`` and the appropriate built-in exception for backward
compatibility.

Per-coordinate domain failures are never raised by the transform engine;
they are reported as ``False`` results or failure counts.

Author
------
projxform developers

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-17

Modified
--------
2026-10-17
"""


class ProjxformError(Exception):
    """Base exception for all projxform errors."""


class ValidationError(ProjxformError, ValueError):
    """Invalid input data or parameters.

    Raised for coordinate array shape mismatches, empty SRS definitions,
    and other caller mistakes that are not projection domain errors.
    """


class DependencyError(ProjxformError, ImportError):
    """Missing optional dependency required for a specific operation.

    Raised when an SRS needs pyproj to be resolved and pyproj is not
    installed.
    """


class ConfigurationError(ProjxformError, RuntimeError):
    """Fatal construction-time failure of a transform engine.

    Raised when the general projection backend is required for an SRS
    pair but is not available. The engine is never usable in this state.
    """
