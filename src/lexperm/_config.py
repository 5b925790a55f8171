"""Precondition-check configuration for the lexperm package.

Controls whether the engine verifies that a collection's length still
matches the permutation vector bound to it before every in-place step.
A mismatch means the caller resized the collection while a
:class:`~lexperm.Permuter` was using it, which is reported as a
:class:`~lexperm.exceptions.PermutationInvariantError`.

Resolution order (first match wins):
    1. Programmatic override via :func:`set_check_mode`.
    2. The ``LEXPERM_CHECKS`` environment variable.
    3. ``"strict"``, or ``"off"`` when the interpreter runs with ``-O``.

Valid mode names are ``"strict"`` and ``"off"`` (case-insensitive).

Examples:
    Disable the length checks globally from the shell::

        export LEXPERM_CHECKS=off

    Disable them programmatically::

        import lexperm
        lexperm.set_check_mode("off")

    Re-enable the default resolution::

        lexperm.set_check_mode("auto")
"""

from __future__ import annotations

import os

_VALID_MODES = {"strict", "off", "auto"}

# Sentinel indicating "no programmatic override has been set".
_check_mode_override: str | None = None


def get_check_mode() -> str:
    """Return the active check mode (``"strict"`` or ``"off"``).

    Resolution order:
        1. Value set by :func:`set_check_mode` (unless ``"auto"``).
        2. ``LEXPERM_CHECKS`` environment variable.
        3. ``"strict"`` unless assertions are disabled (``python -O``).

    Returns:
        ``"strict"`` or ``"off"``.
    """
    # 1. Programmatic override
    if _check_mode_override is not None and _check_mode_override != "auto":
        return _check_mode_override

    # 2. Environment variable
    env = os.environ.get("LEXPERM_CHECKS", "").strip().lower()
    if env in ("strict", "off"):
        return env

    # 3. Interpreter default
    return "strict" if __debug__ else "off"


def set_check_mode(name: str) -> None:
    """Override the check mode.

    Args:
        name: One of ``"strict"``, ``"off"``, or ``"auto"``
            (case-insensitive).  ``"auto"`` restores the default
            resolution order.

    Raises:
        ValueError: If *name* is not a recognised mode.
    """
    global _check_mode_override
    normalised = name.strip().lower()
    if normalised not in _VALID_MODES:
        raise ValueError(
            f"Unknown check mode '{name}'. Choose from: {sorted(_VALID_MODES)}"
        )
    _check_mode_override = normalised


def checks_enabled() -> bool:
    """Return ``True`` when length preconditions should be verified."""
    return get_check_mode() == "strict"
