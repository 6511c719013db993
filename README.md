# gravharmonics

This package provides building blocks for spherical-harmonic gravity field work:

- `gravharmonics.nlm.Nlm` holds the normalization constants for fully-normalized
  spherical harmonics, `N_lm = sqrt((2 - δ_0m)(2l + 1)(l - m)!/(l + m)!)`. They
  are built with a recursion, so the factorials never overflow.
- `gravharmonics.plm.Plm` holds the fully-normalized associated Legendre
  functions at one co-latitude. They are built with the fixed-order,
  increasing-degree recursion. First and second derivatives with respect to
  co-latitude are optional.
- `gravharmonics.flmp.Flmp` holds the fully-normalized inclination functions at
  one inclination. They come from a real FFT of the unit disturbing potential
  sampled along a great circle, so no approximation is involved. Derivatives
  with respect to inclination are optional. You can look values up by
  `(l, m, p)` or by `(l, m, k)` with `k = l - 2p`.

## Installation

```
pip install .
```

The only runtime dependency is numpy. To run the tests, install the `test` extra
with `pip install .[test]`, then run `pytest`.

## Usage

```python
import math

from gravharmonics.nlm import Nlm
from gravharmonics.plm import Plm
from gravharmonics.flmp import Flmp

# Normalization constants up to degree 10
nlm = Nlm(10)
nlm.value(3, 2)

# Legendre functions at 65 degrees co-latitude, with first and second derivatives
plm = Plm(100, math.radians(65), True, True)
plm.plm_bar(14, 4)    # fully-normalized
plm.plm(14, 4)        # unnormalized (divided by Nlm.value)
plm.dplm_bar(13, 5)   # d/dtheta
plm.ddplm_bar(13, 5)  # d2/dtheta2
plm.theta             # the co-latitude the object was built for

# Inclination functions at 109.9 degrees inclination, with derivatives
flmp = Flmp(100, math.radians(109.9), True)
flmp.flmp(17, 15, 8)       # by (l, m, p)
flmp.flmk(17, 15, 1)       # by (l, m, k), with k = l - 2p; 0.0 when |k| > l
flmp.dflmp(17, 15, 8)      # d/dI
flmp.dflmk(17, 15, 1)      # d/dI by (l, m, k); 0.0 when |k| > l
flmp.flmk_star(17, 15, 1)  # cross-track inclination function
```

Each object computes and stores its values for every degree up to `l_max` when
you build it. Lookups after that are plain table reads. Building an `Flmp` also
builds a `Plm` for each sample on the great circle, so large `l_max` values take
noticeably longer.

## Errors

- A negative `l_max` raises `ValueError`.
- A degree or order outside `0 <= m <= l <= l_max` raises `IndexError`. For
  `Flmp`, so does a `p` outside `0 <= p <= l`.
- Asking for a derivative that was not computed raises `RuntimeError`. `Plm`
  computes second derivatives only when first derivatives are requested too.
  `Flmp.flmk_star` needs the inclination derivatives.
- Requesting `Plm` derivatives at a pole, where `sin(theta) == 0`, raises
  `ValueError`.

## What it does not do

This is a library only. It has no command-line tool. It does not read or write
gravity field coefficient files, and it does not synthesize potentials or
accelerations from a model. It only provides the functions that such work is
built on.