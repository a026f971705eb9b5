"""Boundary-validation configuration for the combinatorial package.

The enumeration core never validates its parameters: an inverted range,
a negative length, or a buffer shorter than the declared length gives
undefined results.  This module controls an optional boundary layer
that checks those preconditions once, when a generator is constructed.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_validation`.
    2. The ``COMBINATORIAL_VALIDATE`` environment variable.
    3. The default, ``"off"``.

Valid mode names are ``"off"``, ``"warn"`` and ``"strict"``
(case-insensitive).  ``"auto"`` clears the programmatic override.

Examples:
    Enable strict checks from the shell::

        export COMBINATORIAL_VALIDATE=strict

    Enable warnings programmatically::

        import combinatorial
        combinatorial.set_validation("warn")

    Restore the default resolution order::

        combinatorial.set_validation("auto")
"""

from __future__ import annotations

import os

_VALID_MODES = {"off", "warn", "strict", "auto"}

_ENV_VAR = "COMBINATORIAL_VALIDATE"

# Sentinel indicating "no programmatic override has been set".
_validation_override: str | None = None


def get_validation() -> str:
    """Return the active validation mode (``"off"``, ``"warn"`` or ``"strict"``).

    Resolution order:
        1. Value set by :func:`set_validation` (unless ``"auto"``).
        2. ``COMBINATORIAL_VALIDATE`` environment variable.
        3. ``"off"``.

    Returns:
        ``"off"``, ``"warn"`` or ``"strict"``.
    """
    # 1. Programmatic override
    if _validation_override is not None and _validation_override != "auto":
        return _validation_override

    # 2. Environment variable; unknown values are ignored.
    env = os.environ.get(_ENV_VAR, "").strip().lower()
    if env in ("off", "warn", "strict"):
        return env

    # 3. Default
    return "off"


def set_validation(name: str) -> None:
    """Override the validation mode.

    Args:
        name: One of ``"off"``, ``"warn"``, ``"strict"`` or ``"auto"``
            (case-insensitive).  ``"auto"`` restores the default
            resolution order.

    Raises:
        ValueError: If *name* is not a recognised mode.
    """
    global _validation_override
    normalised = name.strip().lower()
    if normalised not in _VALID_MODES:
        raise ValueError(
            f"Unknown validation mode '{name}'. Choose from: {sorted(_VALID_MODES)}"
        )
    _validation_override = normalised
