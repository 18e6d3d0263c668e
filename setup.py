#!/usr/bin/env python
"""Shim setup.py for backwards compatibility with older tooling.

Packaging metadata for quickfile lives in pyproject.toml; this file only
lets tools without PEP 517 support install the project.
"""

from setuptools import setup

if __name__ == "__main__":
    setup()
