#!/usr/bin/env python3

from setuptools import setup

setup(
    name='passforge',
    version='0.3.0',
    description='Random, seeded and dictionary password generator',
    python_requires='>=3.8',
    packages=['passforge'],
    install_requires=[
        'prompt_toolkit>=3.0',
        'blessed>=1.17',
        'pyperclip>=1.8',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'passforge = passforge.main:main',
        ],
    },
)
