"""Fully-normalized inclination functions and their derivatives."""

from __future__ import annotations

import math
from typing import Callable

import numpy as np

from gravharmonics.plm import Plm


class Flmp:
    """Inclination functions at a given inclination.

    The functions are obtained by sampling the unit disturbing potential of
    each degree and order along a great circle inclined at ``inclination`` and
    analysing it with a real FFT, which is exact for the number of samples
    used.  The same analysis of the potential's inclination derivative yields
    the derivatives of the inclination functions.

    Both the ``F_lmp`` indexing and the ``F_lmk`` indexing with ``k = l - 2p``
    are available.
    """

    def __init__(
        self,
        l_max: int = 0,
        inclination: float = 0.0,
        compute_derivatives: bool = False,
    ) -> None:
        if l_max < 0:
            raise ValueError(f"l_max must be non-negative, got {l_max}")
        self.l_max = l_max
        self.inclination = inclination

        n = 2 ** math.ceil(math.log2(2 * l_max + 1))
        u = 2 * math.pi / n * np.arange(n)
        sin_u = np.sin(u)
        cos_u = np.cos(u)
        cos_i = math.cos(inclination)
        sin_i = math.sin(inclination)
        lam = np.arctan2(cos_i * sin_u, cos_u)
        theta = np.arccos(sin_i * sin_u)

        samples = [Plm(l_max, float(t), compute_derivatives) for t in theta]

        orders = np.arange(l_max + 1)
        phase = np.outer(lam, orders)
        cos_ml = np.cos(phase)
        sin_ml = np.sin(phase)

        size = l_max + 1
        self._f = np.zeros((size, size, size))
        self._df: np.ndarray | None = None

        for l in range(l_max + 1):
            values = self._sample(samples, Plm.plm_bar, l)
            series = values * (cos_ml[:, : l + 1] + sin_ml[:, : l + 1])
            self._store(self._f, l, series, n)

        if compute_derivatives:
            tan_u = sin_u / cos_u
            dtheta_di = -sin_u * cos_i / np.sqrt(1 - sin_i * sin_i * sin_u * sin_u)
            dlam_di = -sin_i * tan_u / (1 + cos_i * cos_i * tan_u * tan_u)
            self._df = np.zeros((size, size, size))
            for l in range(l_max + 1):
                values = self._sample(samples, Plm.plm_bar, l)
                slopes = self._sample(samples, Plm.dplm_bar, l)
                ms = orders[: l + 1]
                cos_part = cos_ml[:, : l + 1]
                sin_part = sin_ml[:, : l + 1]
                series = slopes * dtheta_di[:, None] * (cos_part + sin_part) + values * (
                    ms * (cos_part - sin_part)
                ) * dlam_di[:, None]
                self._store(self._df, l, series, n)

    @staticmethod
    def _sample(
        samples: list[Plm], getter: Callable[[Plm, int, int], float], l: int
    ) -> np.ndarray:
        return np.array([[getter(s, l, m) for m in range(l + 1)] for s in samples])

    @staticmethod
    def _store(table: np.ndarray, l: int, series: np.ndarray, n: int) -> None:
        spectrum = np.fft.rfft(series, axis=0)[: l + 1]
        c = 2 * spectrum.real / n
        s = -2 * spectrum.imag / n
        freqs = np.arange(l % 2, l + 1, 2)
        low = (l - freqs) // 2
        high = (l + freqs) // 2
        for m in range(l + 1):
            plus = (c[freqs, m] + s[freqs, m]) / 2
            minus = (c[freqs, m] - s[freqs, m]) / 2
            row = table[l, m]
            if l % 2 == m % 2:
                row[low] = plus
                row[high] = minus
            else:
                row[high] = -plus
                row[low] = -minus

    def _check(self, l: int, m: int, p: int) -> None:
        if not 0 <= m <= l <= self.l_max:
            raise IndexError(
                f"degree/order ({l}, {m}) outside 0 <= m <= l <= {self.l_max}"
            )
        if not 0 <= p <= l:
            raise IndexError(f"p-index {p} outside 0 <= p <= {l}")

    def _derivatives(self) -> np.ndarray:
        if self._df is None:
            raise RuntimeError("inclination function derivatives were not computed")
        return self._df

    def flmp(self, l: int, m: int, p: int) -> float:
        """Inclination function for degree ``l``, order ``m`` and index ``p``."""
        self._check(l, m, p)
        return float(self._f[l, m, p])

    def flmk(self, l: int, m: int, k: int) -> float:
        """Inclination function in ``k = l - 2p`` indexing; zero when ``|k| > l``."""
        if abs(k) > l:
            return 0.0
        return self.flmp(l, m, (l - k) // 2)

    def dflmp(self, l: int, m: int, p: int) -> float:
        """Inclination derivative for degree ``l``, order ``m`` and index ``p``."""
        table = self._derivatives()
        self._check(l, m, p)
        return float(table[l, m, p])

    def dflmk(self, l: int, m: int, k: int) -> float:
        """Inclination derivative in ``k`` indexing; zero when ``|k| > l``."""
        self._derivatives()
        if abs(k) > l:
            return 0.0
        return self.dflmp(l, m, (l - k) // 2)

    def flmk_star(self, l: int, m: int, k: int) -> float:
        """Cross-track inclination function for degree ``l``, order ``m`` and ``k``."""
        cos_i = math.cos(self.inclination)
        sin_i = math.sin(self.inclination)
        return 0.5 * (
            ((k - 1) * cos_i - m) / sin_i * self.flmk(l, m, k - 1)
            + ((k + 1) * cos_i - m) / sin_i * self.flmk(l, m, k + 1)
            - self.dflmk(l, m, k - 1)
            + self.dflmk(l, m, k + 1)
        )