import os
import re

import setuptools


def read(fname):
   return open(os.path.join(os.path.dirname(__file__), fname)).read()


def version():
   return re.search(r'^__version__ = "([^"]+)"', read("volume_fader/__init__.py"), re.M).group(1)


setuptools.setup(
   name='volume-fader',
   version=version(),
   description='Smooth, click-free volume fades for media objects',
   long_description=read('README.md'),
   long_description_content_type="text/markdown",
   license="BSD2",
   keywords="volume fade audio media",
   packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
   install_requires=[
      'numpy',
   ],
   extras_require={
      'scripts': ['soundfile'],
      'test': ['pytest'],
   },
   classifiers=[
      "Programming Language :: Python",
      "Programming Language :: Python :: 3",
      "Operating System :: OS Independent",
    ],
   python_requires='>=3.10',
)
