#!/usr/bin/env python3
"""
file   fft3d_check.py

@author muFFTCheck developers

@date   18 Oct 2026

@brief  verify all available 3D FFT backends

@section LICENCE

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
"""

import sys
import os

sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)),
                             "../python"))
from muFFTCheck.CommandLine import main

sys.exit(main())
