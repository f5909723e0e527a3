#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Stimulus.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Deterministic pseudorandom input volumes

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

from .Cases import Precision


def generate_stimulus(seed, nb_elements, precision=Precision.double):
    """
    Generate a reproducible sequence of complex samples.

    Real and imaginary parts are drawn independently and uniformly from
    [0, 1), real part first, from a Mersenne twister seeded with `seed`.
    The legacy `RandomState` generator is used because its stream is
    guaranteed to be stable across numpy releases.

    Parameters
    ----------
    seed : int
        Seed of the random number generator.
    nb_elements : int
        Number of complex samples.
    precision : Precision
        Precision of the returned samples. (Default: double)

    Returns
    -------
    stimulus : np.ndarray
        One-dimensional complex array of length `nb_elements`.
    """
    if isinstance(precision, str):
        precision = Precision.from_string(precision)
    random_state = np.random.RandomState(seed)
    components = random_state.random_sample(2 * nb_elements)
    components = components.astype(precision.real_dtype)
    return components.view(precision.complex_dtype).copy()
