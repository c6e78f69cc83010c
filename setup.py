# setup.py
from setuptools import setup, find_packages

setup(
    name="mallet",
    version="0.1.0",
    description="A small parenthesized expression language: reader, evaluator and printer",
    packages=find_packages(include=["mallet", "mallet.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
