#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Layout.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Index translation between full and Hermitian-packed grid layouts

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


def nb_packed_z(nz, real_to_complex):
    """
    Extent of the fastest varying dimension in the output of a transform.
    Real-to-complex transforms store only the non-redundant half
    z = 0 .. nz//2 of the Hermitian symmetric spectrum.
    """
    return nz // 2 + 1 if real_to_complex else nz


def full_index(x, y, z, dims):
    """Flat index of (x, y, z) in a full (X, Y, Z) volume."""
    nx, ny, nz = dims
    return (x * ny + y) * nz + z


def packed_index(x, y, z, dims, real_to_complex):
    """Flat index of (x, y, z) in the backend output layout."""
    nx, ny, nz = dims
    nzp = nb_packed_z(nz, real_to_complex)
    return (x * ny + y) * nzp + z


def packed_coords(dims, real_to_complex):
    """
    Grid coordinates of all elements of the backend output layout, in
    storage order.

    Returns
    -------
    x, y, z : np.ndarray
        Flat integer arrays of length X*Y*Zp.
    """
    nx, ny, nz = dims
    nzp = nb_packed_z(nz, real_to_complex)
    x, y, z = np.meshgrid(np.arange(nx), np.arange(ny), np.arange(nzp),
                          indexing='ij')
    return x.ravel(), y.ravel(), z.ravel()


def packed_to_full_index(dims, real_to_complex):
    """
    For every element of the backend output layout, the flat index of the
    same frequency in the full volume. Entry i of the returned array is
    the full index of packed element i.
    """
    x, y, z = packed_coords(dims, real_to_complex)
    return full_index(x, y, z, dims)


def extract_non_redundant(full_volume, dims, real_to_complex):
    """
    Pick the elements of a full volume that a backend stores, in the
    backend's packed order.
    """
    full_volume = np.asarray(full_volume).reshape(-1)
    return full_volume[packed_to_full_index(dims, real_to_complex)]


def hermitian_completion(packed, dims):
    """
    Reconstruct the full spectrum of a real input from the packed
    non-redundant half. The omitted element (x, y, z) with z > Z//2 is the
    complex conjugate of the stored element (-x mod X, -y mod Y, Z - z).
    """
    nx, ny, nz = dims
    nzp = nb_packed_z(nz, True)
    packed = np.asarray(packed).reshape(nx, ny, nzp)
    full = np.empty((nx, ny, nz), dtype=packed.dtype)
    full[:, :, :nzp] = packed
    if nz > nzp:
        z = np.arange(nzp, nz)
        mx = (-np.arange(nx)) % nx
        my = (-np.arange(ny)) % ny
        mirrored = packed[np.ix_(mx, my, nz - z)]
        full[:, :, nzp:] = np.conj(mirrored)
    return full.reshape(-1)


def real_input(stimulus, nb_grid_pts):
    """
    Real-valued input of a real-to-complex transform, taken from a complex
    stimulus. Real sample i is component i % 2 of complex sample i // 2,
    i.e. the first `nb_grid_pts` floats of the stimulus memory.
    """
    stimulus = np.ascontiguousarray(stimulus)
    return stimulus.view(stimulus.real.dtype)[:nb_grid_pts]


def complex_embedding(values):
    """Complex volume with the given real part and zero imaginary part."""
    values = np.asarray(values)
    embedded = np.zeros(values.shape, dtype=np.complex128)
    embedded.real = values
    return embedded


def nb_round_trip_values(nb_grid_pts, real_to_complex):
    """
    Number of complex grid elements that hold input data, and thus have
    to be recovered by a round trip.
    """
    return nb_grid_pts // 2 if real_to_complex else nb_grid_pts
