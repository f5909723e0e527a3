#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Reference.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Reference 3D discrete Fourier transform evaluated from its definition

Copyright © 2026 muFFTCheck developers

µFFTCheck is free software; you can redistribute it and/or
modify it under the terms of the GNU Lesser General Public License as
published by the Free Software Foundation, either version 3, or (at
your option) any later version.

µFFTCheck is distributed in the hope that it will be useful, but
WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
Lesser General Public License for more details.

You should have received a copy of the GNU Lesser General Public License
along with µFFTCheck; see the file COPYING. If not, write to the
Free Software Foundation, Inc., 59 Temple Place - Suite 330,
Boston, MA 02111-1307, USA.

Additional permission under GNU GPL version 3 section 7

If you modify this Program, or any covered work, by linking or combining it
with proprietary FFT implementations or numerical libraries, containing parts
covered by the terms of those libraries' licenses, the licensors of this
Program grant you additional permission to convey the resulting work.
"""

import numpy as np


def dft_matrix(n, sign=-1):
    """
    Matrix of the one-dimensional discrete Fourier transform of length n,
    W[k, j] = exp(sign * 2 pi i * k * j / n). The product k * j is reduced
    modulo n before the exponential so the phase stays accurate for large
    n.
    """
    k = np.arange(n)
    phase = np.outer(k, k) % n
    return np.exp(sign * 2j * np.pi * phase / n)


class ReferenceFFT:
    """
    Reference (oracle) transform of a three-dimensional complex volume.

    The 3D DFT is separable, so the transform is evaluated as three
    successive applications of the dense DFT matrix along each axis. No
    fast algorithm is involved and all arithmetic is carried out on the
    host in double precision. Both directions are unnormalised, i.e.
    `inverse(forward(a)) == prod(dims) * a`.

    Volumes are flat sequences in row-major order, element (x, y, z)
    sits at index x*Y*Z + y*Z + z.

    Parameters
    ----------
    dims : tuple of int
        Grid extents (X, Y, Z).
    """

    def __init__(self, dims):
        self.dims = tuple(int(n) for n in dims)
        self._matrices = {}

    @property
    def nb_grid_pts(self):
        return int(np.prod(self.dims))

    def _matrix(self, n, sign):
        key = (n, sign)
        if key not in self._matrices:
            self._matrices[key] = dft_matrix(n, sign)
        return self._matrices[key]

    def _transform(self, volume, sign):
        arr = np.array(volume, dtype=np.complex128, copy=True)
        if arr.size != self.nb_grid_pts:
            raise ValueError('Volume has {} elements, expected {} for a {} '
                             'grid'.format(arr.size, self.nb_grid_pts,
                                           self.dims))
        arr = arr.reshape(self.dims)
        for axis, n in enumerate(self.dims):
            arr = np.tensordot(self._matrix(n, sign), arr, axes=([1], [axis]))
            arr = np.moveaxis(arr, 0, axis)
        return np.ascontiguousarray(arr).reshape(-1)

    def forward(self, volume):
        """Forward transform, exp(-2 pi i k x / n) kernel."""
        return self._transform(volume, -1)

    def inverse(self, volume):
        """Unnormalised inverse transform, exp(+2 pi i k x / n) kernel."""
        return self._transform(volume, +1)
