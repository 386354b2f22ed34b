#!/usr/bin/env python

"""
 Copyright 2012 the original author or authors

 Licensed under the Apache License, Version 2.0 (the "License");
 you may not use this file except in compliance with the License.
 You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

 Unless required by applicable law or agreed to in writing,
 software distributed under the License is distributed on an
 "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
 KIND, either express or implied.  See the License for the
 specific language governing permissions and limitations
 under the License.
"""

from setuptools import find_packages, setup
from codecs import open

from pathnames import __version__


install_requires = []
tests_require = install_requires + [
    'coverage',
    'mockito',
    'pytest',
    ]

setup(
    name='pathnames',
    version=__version__,
    license='Apache Software License (http://www.apache.org/licenses/LICENSE-2.0)',
    description='Filesystem independent path name parsing, normalization and resolution.',
    # don't ever depend on refcounting to close files anywhere else
    long_description=open('README.rst', encoding='utf-8').read(),
    packages=find_packages(exclude=['examples', 'tests']),
    zip_safe=False,
    platforms='any',
    python_requires='>=3.8',
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={'test': tests_require},
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: System :: Filesystems',
    ]
)
