# setup.py
from setuptools import setup, find_packages

setup(
    name="protolisp",
    version="0.1.0",
    description="A tree-walking interpreter for a small Lisp with prototype-based objects",
    packages=find_packages(include=["protolisp", "protolisp.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest>=7", "hypothesis>=6"],
    },
    entry_points={
        "console_scripts": ["protolisp = protolisp.repl:main"],
    },
    zip_safe=False,
)
