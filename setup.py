# This file is part of structhash.
#
# Most of this work is copyright (C) 2026 the structhash authors. Consult
# the git log if you need to determine who owns an individual contribution.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

import os

import setuptools


def local_file(name):
    return os.path.relpath(os.path.join(os.path.dirname(__file__), name))


SOURCE = local_file('src')
README = local_file('README.rst')


# Assignment to placate pyflakes. The actual version is from the exec that
# follows.
__version__ = None

with open(local_file('src/structhash/version.py')) as o:
    exec(o.read())

assert __version__ is not None


extras = {
    'pytest': ['pytest>=3.0'],
}

extras['all'] = sorted(sum(extras.values(), []))

install_requires = ['attrs>=19.2.0', 'hypothesis>=5.0']


setuptools.setup(
    name='structhash',
    version=__version__,
    author='the structhash authors',
    packages=setuptools.find_packages(SOURCE),
    package_dir={'': SOURCE},
    license='MPL v2',
    description='Deterministic, composable structural hash codes',
    zip_safe=False,
    extras_require=extras,
    install_requires=install_requires,
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Mozilla Public License 2.0 (MPL 2.0)',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Software Development :: Libraries',
    ],
    long_description=open(README).read(),
)
