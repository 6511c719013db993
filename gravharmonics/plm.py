"""Fully-normalized associated Legendre functions and their derivatives."""

from __future__ import annotations

import math

import numpy as np

from gravharmonics.nlm import Nlm


class Plm:
    """Associated Legendre functions at a given co-latitude.

    The fully-normalized functions are computed with the forward column
    (fixed-order, increasing-degree) recursion.  Co-latitude derivatives are
    computed on request; second derivatives are only computed when first
    derivatives are requested as well.
    """

    def __init__(
        self,
        l_max: int = 0,
        theta: float = 0.0,
        derivatives: bool = False,
        second_derivatives: bool = False,
    ) -> None:
        if l_max < 0:
            raise ValueError(f"l_max must be non-negative, got {l_max}")
        self.l_max = l_max
        self.theta = theta
        self._nlm = Nlm(l_max)

        t = math.cos(theta)
        u = math.sin(theta)
        self._p = self._compute_values(l_max, t, u)
        self._dp: np.ndarray | None = None
        self._ddp: np.ndarray | None = None

        if derivatives:
            if u == 0.0:
                raise ValueError("co-latitude derivatives are undefined at the poles")
            f = self._derivative_factors(l_max)
            self._dp = self._compute_first(l_max, t, u, self._p, f)
            if second_derivatives:
                self._ddp = self._compute_second(l_max, t, u, self._p, self._dp, f)

    @staticmethod
    def _compute_values(l_max: int, t: float, u: float) -> np.ndarray:
        p = np.zeros((l_max + 1, l_max + 1))
        p[0, 0] = 1.0
        if l_max > 0:
            p[1, 1] = math.sqrt(3) * u
        for l in range(2, l_max + 1):
            p[l, l] = math.sqrt((2 * l + 1.0) / (2 * l)) * u * p[l - 1, l - 1]
        for l in range(1, l_max + 1):
            ms = np.arange(l, dtype=float)
            a = np.sqrt((2 * l - 1.0) * (2 * l + 1) / ((l - ms) * (l + ms)))
            row = a * t * p[l - 1, :l]
            if l >= 2:
                inner = ms[:-1]
                b = np.zeros(l)
                b[:-1] = np.sqrt(
                    ((2 * l + 1.0) * (l + inner - 1) * (l - inner - 1))
                    / ((l - inner) * (l + inner) * (2 * l - 3))
                )
                row = row - b * p[l - 2, :l]
            p[l, :l] = row
        return p

    @staticmethod
    def _derivative_factors(l_max: int) -> np.ndarray:
        f = np.zeros((l_max + 1, l_max + 1))
        for l in range(l_max + 1):
            ms = np.arange(l + 1)
            f[l, : l + 1] = np.sqrt((l * l - ms * ms) * (2 * l + 1) / (2 * l - 1.0))
        return f

    @staticmethod
    def _compute_first(
        l_max: int, t: float, u: float, p: np.ndarray, f: np.ndarray
    ) -> np.ndarray:
        dp = np.zeros_like(p)
        diag = np.arange(l_max + 1)
        dp[diag, diag] = diag * t / u * p[diag, diag]
        for l in range(1, l_max + 1):
            dp[l, :l] = 1.0 / u * (l * t * p[l, :l] - f[l, :l] * p[l - 1, :l])
        return dp

    @staticmethod
    def _compute_second(
        l_max: int,
        t: float,
        u: float,
        p: np.ndarray,
        dp: np.ndarray,
        f: np.ndarray,
    ) -> np.ndarray:
        ddp = np.zeros_like(p)
        diag = np.arange(l_max + 1)
        ddp[diag, diag] = (diag - 1) * t / u * dp[diag, diag] - diag * p[diag, diag]
        for l in range(1, l_max + 1):
            ddp[l, :l] = (
                1.0 / u * ((l - 1) * t * dp[l, :l] - f[l, :l] * dp[l - 1, :l])
                - l * p[l, :l]
            )
        return ddp

    def _check(self, l: int, m: int) -> None:
        if not 0 <= m <= l <= self.l_max:
            raise IndexError(
                f"degree/order ({l}, {m}) outside 0 <= m <= l <= {self.l_max}"
            )

    def _lookup(self, table: np.ndarray | None, what: str, l: int, m: int) -> float:
        if table is None:
            raise RuntimeError(f"{what} were not computed")
        self._check(l, m)
        return float(table[l, m])

    def plm_bar(self, l: int, m: int) -> float:
        """Fully-normalized function of degree ``l`` and order ``m``."""
        return self._lookup(self._p, "values", l, m)

    def plm(self, l: int, m: int) -> float:
        """Unnormalized function of degree ``l`` and order ``m``."""
        return self.plm_bar(l, m) / self._nlm.value(l, m)

    def dplm_bar(self, l: int, m: int) -> float:
        """Fully-normalized co-latitude derivative."""
        return self._lookup(self._dp, "derivatives", l, m)

    def dplm(self, l: int, m: int) -> float:
        """Unnormalized co-latitude derivative."""
        return self.dplm_bar(l, m) / self._nlm.value(l, m)

    def ddplm_bar(self, l: int, m: int) -> float:
        """Fully-normalized second co-latitude derivative."""
        return self._lookup(self._ddp, "second derivatives", l, m)

    def ddplm(self, l: int, m: int) -> float:
        """Unnormalized second co-latitude derivative."""
        return self.ddplm_bar(l, m) / self._nlm.value(l, m)