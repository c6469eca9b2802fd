"""Human-readable display of data sizes."""

from __future__ import annotations

_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024

_UNITS = ((1, "bytes"), (_KB, "KB"), (_MB, "MB"), (_GB, "GB"))


def to_display_approx_data_size(size: int) -> str:
    """Format a byte count with two decimals in bytes, KB, MB or GB.

    A unit is used while the size is at most 1024 of that unit; sizes beyond
    1024 GB are shown in GB with a ``GB( big )`` suffix.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, not {type(size).__name__}")
    for unit_size, unit_name in _UNITS:
        if size <= unit_size * 1024:
            return f"{size / unit_size:.2f} {unit_name}"
    return f"{size / _GB:.2f} GB( big )"