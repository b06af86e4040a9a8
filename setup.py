"""
Setup script for the mental-poker-table package.

Installs the ``mental_poker`` package from ``src/`` together with the
SQLite schema used by the game repository.
"""

from setuptools import setup, find_packages

setup(
    name="mental-poker-table",
    version="0.1.0",
    description="Round orchestrator for mental-poker card tables",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    package_data={
        "mental_poker._host": ["schema.sql"],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
