import os

from setuptools import find_packages
from setuptools import setup

import contextcolor


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
    name='context-color',
    version=contextcolor.__version__,
    description='Pick a terminal color from the output of a context command',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',

    packages=find_packages('.', exclude=['tests']),
    package_dir = {'': '.'},

    python_requires='>=3.6',
    install_requires=[
        'ansicolor',
    ],
    extras_require={
        'test': ['pytest'],
    },

    # don't install as zipped egg
    zip_safe=False,

    entry_points={
        "console_scripts": [
            "context-color = contextcolor.contextcolor:run_script",
        ]
    },

    classifiers=[
        'Environment :: Console',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Terminals',
    ],
)
