#!/usr/bin/env python
"""Python Casadi based 3D rotation representations

Euler angles (6 axis orders), quaternions and rotation matrices with
conversions between them. The conversions are casadi expressions, so they
evaluate numbers as well as build symbolic graphs.
"""

from setuptools import setup, find_packages
import sys

if sys.version_info < (3, 6):
    raise SystemExit("requires  Python >= 3.6")

DOCLINES = __doc__.split("\n")

CLASSIFIERS = """\
Development Status :: 3 - Alpha
Intended Audience :: Science/Research
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Software Development
Topic :: Scientific/Engineering :: Mathematics
Topic :: Scientific/Engineering :: Physics
Operating System :: Microsoft :: Windows
Operating System :: POSIX
Operating System :: Unix
Operating System :: MacOS
"""

# pylint: disable=invalid-name

package_name = "pyrotation"

setup(
    name=package_name,
    description=DOCLINES[0],
    long_description="\n".join(DOCLINES[2:]),
    license="BSD 3-Clause",
    classifiers=[_f for _f in CLASSIFIERS.split("\n") if _f],
    platforms=["Windows", "Linux", "Solaris", "Mac OS-X", "Unix"],
    install_requires=[
        "numpy",
        "casadi",
    ],
    extras_require={
        "test": ["pytest"],
    },
    packages=find_packages(include=[package_name, package_name + ".*"]),
    version="0.1.0",
    zip_safe=True,
)
