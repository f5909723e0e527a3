#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Dimensions.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Resolution of requested grid extents to dimensions a backend can process

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

from functools import partial

from .Errors import ConfigurationError

# Searching for a legal dimension gives up at this extent. Anything beyond
# does not fit on a device anyway.
DEFAULT_CEILING = 1 << 16


def is_smooth(n, radices):
    """
    Check whether `n` can be written as a product of the given radices.

    Parameters
    ----------
    n : int
        Grid extent.
    radices : iterable of int or None
        Allowed factors. None means that every positive extent is legal.
    """
    if n < 1:
        return False
    if radices is None:
        return True
    unfactored = n
    for radix in sorted(radices):
        while unfactored > 1 and unfactored % radix == 0:
            unfactored //= radix
    return unfactored == 1


def legal_dimension_predicate(radices=None):
    """Return a predicate accepting extents that factor into `radices`."""
    if radices is not None:
        radices = tuple(sorted(radices))
        if any(r < 2 for r in radices):
            raise ConfigurationError(
                'Radices must be integers larger than 1, got {}'
                .format(radices))
    return partial(is_smooth, radices=radices)


def find_legal_dimension(minimum, is_legal, ceiling=DEFAULT_CEILING):
    """
    Return the smallest extent >= `minimum` accepted by `is_legal`.

    Requests below 1 are treated as requests for 1. The result is
    monotonic in `minimum` because the search always walks upwards from
    the request.

    Parameters
    ----------
    minimum : int
        Requested extent.
    is_legal : callable
        Legality predicate of the backend.
    ceiling : int
        Largest extent considered. (Default: DEFAULT_CEILING)

    Raises
    ------
    ConfigurationError
        If no legal extent exists between `minimum` and `ceiling`.
    """
    n = max(int(minimum), 1)
    while n <= ceiling:
        if is_legal(n):
            return n
        n += 1
    raise ConfigurationError(
        'No legal dimension found between {} and {}'.format(minimum, ceiling))


def normalise_shape(dims, is_legal, ceiling=DEFAULT_CEILING):
    return tuple(find_legal_dimension(n, is_legal, ceiling) for n in dims)
