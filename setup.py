"""
setup.py

Установка пакета.

Использование:
    pip install -e .[test]
"""

from setuptools import setup

setup(
    name="peg_engine",
    version="1.0.0",
    description="Backtracking Peg Solitaire solver engine with cancellation and visualization hooks",
    packages=["core", "solvers", "solutions", "peg_io", "utils"],
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-solve=main:main",
        ],
    },
    zip_safe=False,
)
