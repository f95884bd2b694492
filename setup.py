#!/usr/bin/env python
from setuptools import setup

setup(
    name='wordpick',
    version='0.1.0',
    description='Unbiased random word lists for memorable passphrases',
    packages=[
        'wordpick',
        'wordpick.source',
    ],
    install_requires=[
        'ConfigArgParse>=0.12.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    platforms=['POSIX'],
    classifiers=[
        'Environment :: Console',
        'Development Status :: 4 - Beta',
        'Intended Audience :: End Users/Desktop',
        'Intended Audience :: System Administrators',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Security',
        'Topic :: Utilities',
    ],
    entry_points={'console_scripts': [
        'wordpick = wordpick:main',
    ]},
)
