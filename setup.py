#!/usr/bin/env python
import re
from setuptools import setup
import sys


# Check Python version
if sys.version_info < (3, 11):
    sys.exit('Minimum Python version is 3.11')


# stlsolid version
vfile = open('stlsolid/_version.py').read()
vsrch = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]", vfile, re.M)

if vsrch:
    version = vsrch.group(1)
else:
    print('Unable to find a version string in stlsolid/_version.py')

# Modules
modules = [
    'stlsolid.readers'
]

# Tests
tests = [
    'stlsolid.tests'
]

# Hard dependencies
install_requires = [
    'numpy >= 1.26.4'
]

# Soft dependencies
extras_require = {
    'test': ['pytest >= 7.0']
}

# Scripts
console_scripts = [
    'stlsolid = stlsolid.__main__:main'
]

# Info
classifiers = [
    'License :: OSI Approved :: BSD License',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
    'Topic :: Scientific/Engineering'
]

long_description = '''stlsolid reads triangulated surfaces stored in the
STL file format.  Both the ASCII and binary encodings are supported with
the encoding being detected automatically.  Surfaces are returned as an
ordered collection of facets, each with a normal and three vertices,
backed by a single numpy array.'''

setup(name='stlsolid',
      version=version,
      description='ASCII and binary STL reader',
      long_description=long_description,
      license='BSD',
      keywords='STL mesh',
      packages=['stlsolid'] + modules + tests,
      entry_points={'console_scripts': console_scripts},
      python_requires='>=3.11',
      install_requires=install_requires,
      extras_require=extras_require,
      classifiers=classifiers)
