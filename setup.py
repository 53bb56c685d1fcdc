#!/usr/bin/env python

from setuptools import setup

setup(
    name="simplecipher",
    version='1.0',
    description="vigenere style substitution cipher over the lowercase alphabet",
    author="Brandon Wong",
    url="",
    packages=["simplecipher"],
    install_requires=[
        'rich',
        'typer',
        'typing_extensions',
        'numpy',
        'seaborn',
        'pandas',
        'matplotlib',
    ],
    extras_require = {
        'dev': ['pytest']
    },
    entry_points = {
        'console_scripts': ['simplecipher = simplecipher.run:main']
    },
)
