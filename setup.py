#!/usr/bin/env python

# SPDX-FileCopyrightText: 2026 The keynotation developers
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="keynotation",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Parse and format keybinding notation for input methods",
    long_description="Parser and formatter for the key event notation used by SKK-style input method keybindings.",
    author="The keynotation developers",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Text Processing",
    ],
    keywords=[
        "keysym",
        "keybinding",
        "input method",
    ],
    python_requires=">=3.11",
    install_requires=[
        "attrs",
        "cattrs",
        "msgspec",
    ],
    tests_require=["pytest>=6.2.4"],
    extras_require={
        "test": ["pytest>=6.2.4"],
    },
)
