"""Shared type aliases for the combinatorial package."""

from collections.abc import MutableSequence
from typing import Any

import numpy as np

# Mutable buffers accepted by every generator.
Buffer = MutableSequence[Any] | np.ndarray
