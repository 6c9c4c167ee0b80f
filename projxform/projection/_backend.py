# -*- coding: utf-8 -*-
"""
Projection Backend Detection - Detect the general projection library.

Probes for pyproj at import time. Provides a boolean flag and a helper
that SRS resolution and the default transform backend use to verify the
package is installed before touching PROJ.

Dependencies
------------
pyproj

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

# projxform internal
from projxform.exceptions import DependencyError

_HAS_PYPROJ = False

try:
    import pyproj  # noqa: F401
    _HAS_PYPROJ = True
except ImportError:
    pass


def has_pyproj() -> bool:
    """Return True when pyproj is importable."""
    return _HAS_PYPROJ


def require_pyproj(operation: str) -> None:
    """Verify that pyproj is installed.

    Parameters
    ----------
    operation : str
        Human-readable description of what needs pyproj, used in the
        error message (e.g. ``"Resolving SRS 'EPSG:32633'"``).

    Raises
    ------
    DependencyError
        If pyproj is not installed.
    """
    if not _HAS_PYPROJ:
        raise DependencyError(
            f"{operation} requires pyproj. "
            f"Install with: pip install pyproj"
        )
