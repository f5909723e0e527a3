#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   Buffer.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Host and device resident grid buffers

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

from typing import Literal

import numpy as np

MemoryLocationStr = Literal["host", "device"]

# CuPy is optional - only imported when device buffers are used
_cupy = None


def _get_cupy():
    """Lazy import of CuPy for GPU array support."""
    global _cupy
    if _cupy is None:
        try:
            import cupy
            _cupy = cupy
        except ImportError:
            raise ImportError(
                "CuPy is required for device buffers. "
                "Install it with: pip install cupy-cuda12x "
                "(or appropriate CUDA or ROCm version)"
            )
    return _cupy


def _dtype_for(element_size):
    """Complex element type with the given byte width (float2/double2)."""
    if element_size == 8:
        return np.dtype(np.complex64)
    elif element_size == 16:
        return np.dtype(np.complex128)
    raise ValueError(
        f"Unsupported element size {element_size}; expected 8 (single) "
        f"or 16 (double) bytes per complex element.")


class DeviceBuffer:
    """
    Flat buffer of complex grid elements in host or device memory.

    The buffer is allocated once with a fixed number of elements and
    element byte width. Data moves in and out only through `upload` and
    `download`, which copy between host memory and the buffer. For
    "host" buffers the storage is a numpy array, for "device" buffers it
    is a CuPy array on the current CUDA/ROCm device.

    Parameters
    ----------
    nb_elements : int
        Number of complex elements.
    element_size : int
        Bytes per complex element, 8 for single and 16 for double
        precision.
    name : str
        Name used in diagnostics.
    memory_location : str
        "host" (default) or "device".
    """

    def __init__(self, nb_elements, element_size, name,
                 memory_location: MemoryLocationStr = "host"):
        self.name = name
        self.nb_elements = int(nb_elements)
        self.element_size = int(element_size)
        self.dtype = _dtype_for(self.element_size)
        if memory_location == "host":
            self._xp = np
        elif memory_location == "device":
            self._xp = _get_cupy()
        else:
            raise ValueError(
                f"Invalid memory_location: {memory_location!r}. "
                f"Must be 'host' or 'device'.")
        self.memory_location = memory_location
        self._data = self._xp.zeros(self.nb_elements, dtype=self.dtype)

    @property
    def is_on_gpu(self):
        return self.memory_location == "device"

    @property
    def data(self):
        """Underlying numpy or CuPy array (no copy)."""
        return self._data

    def upload(self, host_array):
        """
        Copy host data into the buffer. `host_array` may be shorter than
        the buffer; the remaining elements are left untouched.
        """
        host_array = np.asarray(host_array, dtype=self.dtype).reshape(-1)
        if host_array.size > self.nb_elements:
            raise ValueError(
                f"Cannot upload {host_array.size} elements into buffer "
                f"'{self.name}' of {self.nb_elements} elements.")
        self._data[:host_array.size] = self._xp.asarray(host_array)

    def download(self):
        """Copy the whole buffer to a new host (numpy) array."""
        if self.is_on_gpu:
            return _get_cupy().asnumpy(self._data)
        return self._data.copy()

    def __repr__(self):
        return (f"DeviceBuffer({self.name!r}, nb_elements={self.nb_elements}, "
                f"element_size={self.element_size}, "
                f"memory_location={self.memory_location!r})")
