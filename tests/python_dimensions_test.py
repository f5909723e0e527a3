#!/usr/bin/env python3
# -*- coding:utf-8 -*-
"""
@file   python_dimensions_test.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  Tests for the resolution of legal FFT dimensions

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

import unittest

from python_test_imports import muFFTCheck
from muFFTCheck.Dimensions import (find_legal_dimension, is_smooth,
                                   legal_dimension_predicate, normalise_shape)


class LegalDimension_Check(unittest.TestCase):
    def setUp(self):
        self.is_legal = legal_dimension_predicate((2, 3, 5, 7))

    def test_is_smooth(self):
        for n in [1, 2, 6, 14, 25, 28, 98, 120, 243]:
            self.assertTrue(is_smooth(n, (2, 3, 5, 7)), msg=n)
        for n in [11, 29, 116, 0, -4]:
            self.assertFalse(is_smooth(n, (2, 3, 5, 7)), msg=n)
        # No restriction
        self.assertTrue(is_smooth(116, None))
        self.assertFalse(is_smooth(0, None))

    def test_find_legal_dimension(self):
        self.assertEqual(find_legal_dimension(116, self.is_legal), 120)
        self.assertEqual(find_legal_dimension(11, self.is_legal), 12)
        self.assertEqual(find_legal_dimension(25, self.is_legal), 25)
        self.assertEqual(find_legal_dimension(0, self.is_legal), 1)
        self.assertEqual(find_legal_dimension(-3, self.is_legal), 1)

    def test_monotonicity(self):
        previous = 0
        for n in range(1, 600):
            legal = find_legal_dimension(n, self.is_legal)
            self.assertGreaterEqual(legal, n)
            self.assertGreaterEqual(legal, previous)
            self.assertTrue(self.is_legal(legal))
            previous = legal

    def test_ceiling(self):
        only_powers_of_two = legal_dimension_predicate((2,))
        self.assertEqual(find_legal_dimension(33, only_powers_of_two), 64)
        with self.assertRaises(muFFTCheck.ConfigurationError):
            find_legal_dimension(33, only_powers_of_two, ceiling=60)

    def test_invalid_radices(self):
        with self.assertRaises(muFFTCheck.ConfigurationError):
            legal_dimension_predicate((1, 2))

    def test_normalise_shape(self):
        self.assertEqual(normalise_shape((216, 216, 116), self.is_legal),
                         (216, 216, 120))
        self.assertEqual(normalise_shape((100, 140, 88),
                                         legal_dimension_predicate()),
                         (100, 140, 88))

    def test_backend_resolver(self):
        class SmoothFFT(muFFTCheck.NumpyFFT):
            radices = (2, 3, 5, 7)

        case = muFFTCheck.TransformCase(
            (216, 216, 116), muFFTCheck.TransformKind.real_to_complex,
            muFFTCheck.Precision.single, 10.0)
        normalised = SmoothFFT.normalise(case)
        self.assertEqual(normalised.dims, (216, 216, 120))
        self.assertEqual(normalised.kind, case.kind)
        self.assertEqual(normalised.tolerance_scale, 10.0)
        # The numpy backend accepts every extent
        self.assertEqual(muFFTCheck.NumpyFFT.normalise(case), case)
        self.assertEqual(muFFTCheck.NumpyFFT.find_legal_dimension(29), 29)
        self.assertEqual(SmoothFFT.find_legal_dimension(29), 30)


if __name__ == '__main__':
    unittest.main()
