# setup.py
from setuptools import setup, find_packages

setup(
    name="tinylisp",
    version="0.1.0",
    description="A minimal dynamically-typed Lisp: reader, evaluator and primitives",
    packages=find_packages(include=["tinylisp", "tinylisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["tinylisp=tinylisp.repl:main"],
    },
    zip_safe=False,
)
