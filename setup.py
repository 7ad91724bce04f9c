# setup.py
from setuptools import setup, find_packages

setup(
    name="malpy",
    version="0.1.0",
    description="A small Lisp interpreter: reader, lexical environments and evaluator",
    packages=find_packages(include=["malpy", "malpy.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": ["malpy=malpy.repl:main"],
    },
    zip_safe=False,
)
