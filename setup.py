# setup.py
from setuptools import setup, find_packages

setup(
    name="mal",
    version="0.1.0",
    description="A tree-walking interpreter for a minimal Lisp with closures, macros and atoms",
    packages=find_packages(include=["mal", "mal.*"]),
    package_data={"mal": ["prelude/*.mal"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mal=mal.repl:main"],
    },
    zip_safe=False,
)
