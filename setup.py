# Copyright © 2026 muFFTCheck developers
#
# µFFTCheck is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Lesser Public License as
# published by the Free Software Foundation, either version 3, or (at
# your option) any later version.
#
# µFFTCheck is distributed in the hope that it will be useful, but
# WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with µFFTCheck; see the file COPYING. If not, write to the
# Free Software Foundation, Inc., 59 Temple Place - Suite 330,
# Boston, MA 02111-1307, USA.
#
# Additional permission under GNU GPL version 3 section 7
#
# If you modify this Program, or any covered work, by linking or combining it
# with proprietary FFT implementations or numerical libraries, containing parts
# covered by the terms of those libraries' licenses, the licensors of this
# Program grant you additional permission to convey the resulting work.

import re
import subprocess

from setuptools import setup

verbose = False


def get_version_from_git():
    """
    Discover muFFTCheck version from git repository.
    """
    git_describe = subprocess.run(
        ['git', 'describe', '--tags', '--dirty', '--always'],
        stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    if git_describe.returncode != 0:
        raise RuntimeError('git execution failed')
    version = git_describe.stdout.decode('latin-1').strip()
    if verbose:
        print('GIT Version detected:', version)
    # Only tags that look like PEP 440 versions are usable
    if re.match(r'^v?\d+(\.\d+)*$', version) is None:
        raise RuntimeError('git describe returned no release tag')
    return version.lstrip('v')


def get_version_from_package(fn):
    text = open(fn, 'r').read()
    version = re.search(r"__version__ = '([A-Za-z0-9_.-]*)'", text).group(1)
    if verbose:
        print('Version contained in {}:'.format(fn), version)
    return version


try:
    version = get_version_from_git()
except (RuntimeError, FileNotFoundError):
    # Detection via git failed. Get version from the package.
    version = get_version_from_package('python/muFFTCheck/__init__.py')

requirements = ['numpy']

setup(
    name='muFFTCheck',
    version=version,
    author='muFFTCheck developers',
    description='muFFTCheck verifies 3D FFT engines on host and device '
                'against a reference transform',
    long_description='',
    packages=['muFFTCheck'],
    package_dir={
        'muFFTCheck': 'python/muFFTCheck',
    },
    scripts=['bin/fft3d_check.py'],
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require={
        'gpu': ['cupy-cuda12x'],
        'test': ['pytest'],
    },
)
