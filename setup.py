from __future__ import annotations

from setuptools import find_namespace_packages, setup

setup(
    name="checkpoint-calc",
    version="0.1.0",
    description="Line calculator that resumes exactly where it stopped after a crash",
    python_requires=">=3.10",
    packages=find_namespace_packages(
        include=["checkpoint_calc", "commands", "core", "parameters", "runtime", "storage"]
    ),
    py_modules=["main"],
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["checkpoint-calc=checkpoint_calc:cli"],
    },
)
