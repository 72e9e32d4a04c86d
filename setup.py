# setup.py
from setuptools import setup, find_packages

setup(
    name="ember",
    version="0.1.0",
    description="A small Lisp with closures, atoms and a trampolined evaluator",
    packages=find_packages(include=["ember", "ember.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["ember=ember.__main__:main"],
    },
    zip_safe=False,
)
