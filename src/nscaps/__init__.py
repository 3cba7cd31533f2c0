"""nscaps: Capabilities of a Linux process in a target kernel namespace."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"
