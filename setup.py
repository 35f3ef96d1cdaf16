from setuptools import setup

long_description = """
Dimcalc is a Python library for calculations with physical quantities and the
substances they describe. Quantities carry exact rational magnitudes together
with the powers of their base units, so that arithmetic checks dimensions
while never losing precision.

A substance is a named collection of proportional properties, such as the
density of gold as the ratio of a mass to a volume. Scaling a substance by an
amount of mass or volume turns it into a concrete sample, from which any
property that conforms to the amount can be derived and rendered as text.
"""

import os, re
with open(os.path.join('dimcalc', '__init__.py')) as f:
  version = next(filter(None, map(re.compile("^version = '([a-zA-Z0-9.]+)'$").match, f))).group(1)

setup(
  name = 'dimcalc',
  version = version,
  description = 'Unit-aware calculations with substances',
  packages = ['dimcalc'],
  long_description = long_description,
  license = 'MIT',
  python_requires = '>=3.8',
  install_requires = ['treelog>=1.0b5', 'stringly'],
  extras_require = dict(
    docs=['Sphinx>=1.6'],
  ),
  command_options = dict(
    test=dict(test_loader=('setup.py', 'unittest:TestLoader')),
  ),
)
