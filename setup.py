# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import setup


setup(
  name='tinymu',
  version='0.0.1',
  description='tinymu is a minimal declarative HTML construction library for Python 3.',
  python_requires='>=3.10',

  packages=['tinymu', 'utest'],
  license='CC0-1.0',
)
