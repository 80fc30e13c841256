# setup.py
from setuptools import setup, find_packages

setup(
    name="sublisp",
    version="0.1.0",
    description="A small Lisp REPL that applies functions by substituting arguments into their source",
    packages=find_packages(include=["sublisp", "sublisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "sublisp=sublisp.repl:main",
        ],
    },
    zip_safe=False,
)
