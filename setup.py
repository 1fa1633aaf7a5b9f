# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name='setlogic',
    version='0.1.0',
    description="Parsing, evaluation and tautology checking for set algebra",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'typing_extensions',
        'ipython'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': ['setlogic=setlogic.__main__:main']
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 or later (GPLv2+)",
        "Operating System :: OS Independent",
    ],
)
