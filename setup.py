# setup.py
from setuptools import setup, find_packages

setup(
    name="bel",
    version="0.1.0",
    description="A small interpreter core for the Bel language",
    packages=find_packages(include=["bel", "bel.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["bel=bel.shell:main"],
    },
    zip_safe=False,
)
