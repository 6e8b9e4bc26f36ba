#!/usr/bin/env python3
"""
Setup script for npm Vite Builder.

Installs the npm_vite_builder package with all dependencies.
"""

from setuptools import setup, find_packages
import os

# Read the README for long description
here = os.path.abspath(os.path.dirname(__file__))
readme_path = os.path.join(here, 'README.md')

if os.path.exists(readme_path):
    with open(readme_path, 'r', encoding='utf-8') as f:
        long_description = f.read()
else:
    long_description = 'Download an npm package and build its HTML pages with Vite.'


def read_requirements(filename):
    """Read requirement lines, skipping comments and blanks."""
    requirements = []
    path = os.path.join(here, filename)
    if os.path.exists(path):
        with open(path, 'r', encoding='utf-8') as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith('#'):
                    requirements.append(line)
    return requirements


install_requires = read_requirements('requirements.txt') or [
    'aiohttp>=3.9.0',
    'rich>=13.0.0',
]
test_requires = read_requirements('requirements-dev.txt') or [
    'pytest>=7.4.0',
    'pytest-asyncio>=0.23.0',
]

setup(
    name='npm-vite-builder',
    version='1.0.0',
    author='npm Vite Builder Team',
    author_email='',
    description='Download an npm package and build its HTML pages with Vite',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Build Tools',
    ],
    python_requires='>=3.8',
    install_requires=install_requires,
    extras_require={
        'test': test_requires,
    },
    entry_points={
        'console_scripts': [
            'npm-vite-build=npm_vite_builder.main:run',
        ],
    },
    keywords=[
        'npm',
        'vite',
        'bundler',
        'tarball',
        'static-site',
    ],
)
