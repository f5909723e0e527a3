#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Tolerance.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Element-wise comparison with precision dependent tolerances

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
from typing import Optional, Tuple

import numpy as np

from .Cases import Precision

FORWARD = 'forward'
ROUND_TRIP = 'round_trip'

# Base tolerances on the per-component relative error. The round trip
# compares data of order one after rescaling by 1/N, the forward check
# compares raw spectra whose magnitudes grow with the grid size.
#                  |---------------------------- forward transform
#                  |                  v--------- round trip
_base_tolerances = {Precision.single: {FORWARD: 1e-3, ROUND_TRIP: 1e-4},
                    Precision.double: {FORWARD: 1e-6, ROUND_TRIP: 1e-8}}


def base_tolerance(precision, check):
    return _base_tolerances[precision][check]


def tolerance_for(case, check):
    """Tolerance applied to `check` of `case`."""
    return base_tolerance(case.precision, check) * case.tolerance_scale


@dataclass(frozen=True)
class ComparisonResult:
    """
    Outcome of comparing a computed volume against its expected values.

    Locations are flat indices into the compared sequences, converted to
    grid coordinates when the comparison was given a shape.
    """
    max_absolute_error: float
    max_relative_error: float
    passed: bool
    tolerance: float
    nb_elements: int
    nb_mismatches: int = 0
    first_mismatch: Optional[int] = None
    worst_index: Optional[int] = None
    worst_expected: complex = 0j
    worst_found: complex = 0j
    shape: Optional[Tuple[int, ...]] = None

    def location(self, index):
        if index is None or self.shape is None:
            return index
        return tuple(int(i) for i in np.unravel_index(index, self.shape))

    def __str__(self):
        s = ('max. abs. error = {:.3e}, max. rel. error = {:.3e}, '
             'tolerance = {:.1e}'.format(self.max_absolute_error,
                                         self.max_relative_error,
                                         self.tolerance))
        if not self.passed:
            s += (', {} of {} elements out of tolerance, first at {}, worst '
                  'at {} (expected {}, found {})'.format(
                      self.nb_mismatches, self.nb_elements,
                      self.location(self.first_mismatch),
                      self.location(self.worst_index),
                      self.worst_expected, self.worst_found))
        return s


def compare(expected, found, tolerance, shape=None):
    """
    Compare two equal-length complex sequences element by element.

    Real and imaginary parts are checked separately. The error of a
    component is |expected - found| / max(|expected|, 1), i.e. relative
    for large values and absolute for values below one. An element fails
    if either component exceeds `tolerance`; NaNs always fail. The whole
    sequence is evaluated, the comparison does not stop at the first
    failure.

    Parameters
    ----------
    expected : array_like
        Reference values.
    found : array_like
        Values under test.
    tolerance : float
        Largest admissible error per component.
    shape : tuple of int, optional
        Grid shape of the sequences, used to report mismatch locations as
        coordinates.

    Returns
    -------
    result : ComparisonResult
    """
    expected = np.asarray(expected, dtype=np.complex128).reshape(-1)
    found = np.asarray(found, dtype=np.complex128).reshape(-1)
    if expected.shape != found.shape:
        raise ValueError('Cannot compare sequences of length {} and {}'
                         .format(len(expected), len(found)))

    expected_parts = np.stack([expected.real, expected.imag])
    found_parts = np.stack([found.real, found.imag])
    absolute = np.abs(expected_parts - found_parts)
    relative = absolute / np.maximum(np.abs(expected_parts), 1.0)

    absolute = absolute.max(axis=0, initial=0.0)
    relative = relative.max(axis=0, initial=0.0)
    # max() propagates NaN per element; `not <=` flags it as failure
    failed = ~(relative <= tolerance)

    nb_mismatches = int(np.count_nonzero(failed))
    first_mismatch = None
    if nb_mismatches > 0:
        first_mismatch = int(np.flatnonzero(failed)[0])

    if len(relative) == 0:
        worst_index = None
    elif np.isnan(relative).any():
        worst_index = int(np.flatnonzero(np.isnan(relative))[0])
    else:
        worst_index = int(np.argmax(relative))

    return ComparisonResult(
        max_absolute_error=float(np.nanmax(absolute, initial=0.0)),
        max_relative_error=float(np.nanmax(relative, initial=0.0)),
        passed=nb_mismatches == 0,
        tolerance=tolerance,
        nb_elements=len(expected),
        nb_mismatches=nb_mismatches,
        first_mismatch=first_mismatch,
        worst_index=worst_index,
        worst_expected=(complex(expected[worst_index])
                        if worst_index is not None else 0j),
        worst_found=(complex(found[worst_index])
                     if worst_index is not None else 0j),
        shape=None if shape is None else tuple(shape))
