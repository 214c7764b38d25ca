"""
Setup script for thielepade
"""
from setuptools import setup, find_packages
import os, re, io


def readfile(*parts):
    """Return contents of file with path relative to script directory"""
    herepath = os.path.abspath(os.path.dirname(__file__))
    fullpath = os.path.join(herepath, *parts)
    with io.open(fullpath, 'r') as f:
        return f.read()

def extract_version(*parts):
    """Extract value of __version__ variable by parsing python script"""
    initfile = readfile(*parts)
    version_re = re.compile(r"(?m)^__version__\s*=\s*['\"]([^'\"]*)['\"]")
    match = version_re.search(initfile)
    return match.group(1)

VERSION = extract_version('src', 'thielepade', '__init__.py')

setup(
    name='thielepade',
    version=VERSION,

    description='Thiele-Pade approximants for analytic continuation',
    keywords=' '.join([
        'condensed-matter',
        'pade',
        'analytic-continuation',
        ]),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Science/Research',
        'Intended Audience :: Developers',
        'Topic :: Scientific/Engineering :: Physics',
        'Programming Language :: Python :: 3',
        ],


    python_requires='>=3.8, <4',
    install_requires=[
        'numpy',
        'mpmath',
        ],

    extras_require={
        'dev': ['pytest'],
        },

    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    entry_points={
        "console_scripts": [
            "thielepade = thielepade.thielepade_eval:run",
        ]
    },

    zip_safe=False,
    )
