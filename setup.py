# setup.py
from setuptools import setup, find_packages

setup(
    name="solution_judge",
    version="0.1.0",
    description="Judge candidate solutions of multi-objective searches",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "sympy",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "solution-judge = solution_judge.cli:main",
        ],
    },
)
