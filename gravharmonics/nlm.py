"""Normalization constants for fully-normalized spherical harmonics."""

from __future__ import annotations

import math

import numpy as np


class Nlm:
    """Normalization constants up to a maximum degree and order.

    The stored constants relate fully-normalized and unnormalized associated
    Legendre functions through ``P_bar = N * P`` with

        N_lm = sqrt((2 - delta_0m) (2l + 1) (l - m)! / (l + m)!)

    and are built recursively to avoid factorial overflow.
    """

    def __init__(self, l_max: int = 0) -> None:
        if l_max < 0:
            raise ValueError(f"l_max must be non-negative, got {l_max}")
        self.l_max = l_max
        table = np.zeros((l_max + 1, l_max + 1))
        degrees = np.arange(l_max + 1)
        table[:, 0] = np.sqrt(2 * degrees + 1)
        for m in range(1, l_max + 1):
            ls = np.arange(m, l_max + 1)
            table[m:, m] = table[m:, m - 1] * np.sqrt(1.0 / ((ls - m + 1) * (ls + m)))
        for m in range(1, l_max + 1):
            table[m:, m] *= math.sqrt(2)
        self._table = table

    def _check(self, l: int, m: int) -> None:
        if not 0 <= m <= l <= self.l_max:
            raise IndexError(
                f"degree/order ({l}, {m}) outside 0 <= m <= l <= {self.l_max}"
            )

    def value(self, l: int, m: int) -> float:
        """Return the normalization constant of degree ``l`` and order ``m``."""
        self._check(l, m)
        return float(self._table[l, m])