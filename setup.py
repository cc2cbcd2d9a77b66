#!/usr/bin/env python
"""The setup script."""
from setuptools import find_packages, setup


def get_version(filename):
    """Extract the package version"""
    with open(filename, encoding='utf8') as in_fh:
        for line in in_fh:
            if line.startswith('__version__'):
                return line.split('=')[1].strip()[1:-1]
    raise ValueError("Cannot extract version from %s" % filename)


with open('README.md', encoding='utf8') as readme_file:
    README = readme_file.read()

try:
    with open('HISTORY.md', encoding='utf8') as history_file:
        HISTORY = history_file.read()
except OSError:
    HISTORY = ''

# requirements for use
requirements = ['numpy']

# requirements for development (testing, generating docs)
dev_requirements = [
    'black',
    'coverage',
    'flake8',
    'hypothesis',
    'isort',
    'pylint',
    'pytest',
    'pytest-cov',
    'pytest-xdist',
    'twine',
    'wheel',
]

VERSION = get_version('./src/intsqrt/__init__.py')

setup(
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: BSD License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Scientific/Engineering :: Mathematics',
    ],
    description=(
        "Exact integer square roots for fixed-width integer types"
    ),
    python_requires='>=3.8',
    install_requires=requirements,
    extras_require={'dev': dev_requirements},
    license="BSD license",
    long_description=README + '\n\n' + HISTORY,
    long_description_content_type='text/markdown',
    include_package_data=True,
    keywords='isqrt',
    name='intsqrt',
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    version=VERSION,
    zip_safe=False,
)
