#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Cases.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Transform case descriptors and the default case matrix

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

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

import numpy as np

from .Errors import ConfigurationError
from .Layout import nb_packed_z


class TransformKind(Enum):
    complex_to_complex = 'c2c'
    real_to_complex = 'r2c'

    @property
    def is_real_to_complex(self):
        return self is TransformKind.real_to_complex


class Precision(Enum):
    single = 'single'
    double = 'double'

    @classmethod
    def from_string(cls, name):
        try:
            return cls(name.lower())
        except ValueError:
            raise ConfigurationError(
                "Unknown precision '{}'. Use 'single' or 'double'."
                .format(name))

    @property
    def real_dtype(self):
        return np.dtype(np.float32 if self is Precision.single
                        else np.float64)

    @property
    def complex_dtype(self):
        return np.dtype(np.complex64 if self is Precision.single
                        else np.complex128)

    @property
    def element_size(self):
        """Byte width of one complex grid element (float2 or double2)."""
        return self.complex_dtype.itemsize


Shape = Tuple[int, int, int]


@dataclass(frozen=True)
class TransformCase:
    """
    Immutable description of a single transform to verify.

    Parameters
    ----------
    dims : tuple of int
        Grid extents (x, y, z). The last dimension is the fastest varying
        one and the one halved by real-to-complex transforms.
    kind : TransformKind
        Complex-to-complex or real-to-complex.
    precision : Precision
        Floating point precision of the grids.
    tolerance_scale : float
        Multiplier applied to the base tolerances of the comparisons.
    """
    dims: Shape
    kind: TransformKind
    precision: Precision
    tolerance_scale: float = 1.0

    def __post_init__(self):
        if len(self.dims) != 3:
            raise ConfigurationError(
                '{}-d transforms are not supported'.format(len(self.dims)))
        if any(int(n) < 1 for n in self.dims):
            raise ConfigurationError(
                'Grid extents must be positive, got {}'.format(self.dims))
        if not self.tolerance_scale > 0:
            raise ConfigurationError(
                'Tolerance scale must be positive, got {}'
                .format(self.tolerance_scale))
        object.__setattr__(self, 'dims', tuple(int(n) for n in self.dims))

    @property
    def nb_grid_pts(self):
        return int(np.prod(self.dims))

    @property
    def nb_packed_z(self):
        return nb_packed_z(self.dims[2], self.kind.is_real_to_complex)

    @property
    def nb_output_pts(self):
        nx, ny, nz = self.dims
        return nx * ny * self.nb_packed_z

    def with_dims(self, dims):
        """Return a copy of this case for a different (normalised) shape."""
        return TransformCase(tuple(dims), self.kind, self.precision,
                             self.tolerance_scale)

    def __str__(self):
        nx, ny, nz = self.dims
        return 'realToComplex: {} xsize: {} ysize: {} zsize: {}'.format(
            int(self.kind.is_real_to_complex), nx, ny, nz)


# The case matrix. Every entry is run against every backend.
#              |-------------------------------- real-to-complex?
#              |      |------------------------- requested grid extents
#              v      v                v-------- tolerance scale in single
_default_cases = [(False, (28, 25, 30), 1.0),
                  (True, (28, 25, 25), 1.0),
                  (True, (25, 28, 25), 1.0),
                  (True, (25, 25, 28), 1.0),
                  (True, (21, 25, 27), 1.0),
                  (True, (49, 98, 14), 1.0),
                  (True, (7, 21, 98), 1.0),
                  (True, (98, 21, 21), 1.0),
                  (True, (18, 98, 6), 1.0),
                  (True, (50, 50, 50), 1.0),
                  (True, (60, 60, 60), 1.0),
                  (False, (64, 64, 64), 1.0),
                  (False, (100, 140, 88), 1e+1),
                  (True, (120, 243, 120), 1e+1),
                  (True, (216, 216, 116), 1e+1),
                  (True, (98, 98, 98), 1e+1)]


def default_cases(precision) -> List[TransformCase]:
    """
    Build the list of cases run by the harness for a given precision.

    The additional tolerance scale of the large irregular shapes only
    applies to single precision; double precision runs all shapes with
    the base tolerances.
    """
    if isinstance(precision, str):
        precision = Precision.from_string(precision)
    cases = []
    for real_to_complex, dims, single_scale in _default_cases:
        kind = (TransformKind.real_to_complex if real_to_complex
                else TransformKind.complex_to_complex)
        scale = single_scale if precision is Precision.single else 1.0
        cases += [TransformCase(dims, kind, precision, scale)]
    return cases
