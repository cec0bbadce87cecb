# setup.py
from setuptools import setup, find_packages

setup(
    name="fuzzlisp",
    version="0.1.0",
    description="S-expression rule language with boolean and fuzzy logic built-ins",
    packages=find_packages(include=["fuzzlisp", "fuzzlisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
