"""Setup script for indexlog."""

from pathlib import Path

from setuptools import find_namespace_packages, setup


def read_version():
    """Read the version from the CLI module without importing it."""
    init = Path(__file__).parent / "indexlog" / "cli" / "__init__.py"
    for line in init.read_text().splitlines():
        if line.strip().startswith('__version__ = "'):
            return line.split('"')[1]
    return "0.1.0"


setup(
    name="indexlog",
    version=read_version(),
    description="Versioned index log entries for a derived-dataset catalog",
    python_requires=">=3.10",
    packages=find_namespace_packages(include=["indexlog", "indexlog.*"]),
    install_requires=[
        "click>=8.1",
        "dependency-injector>=4.41",
        "pydantic>=2.6",
        "pydantic-settings>=2.2",
        "tomli>=2.0; python_version < '3.11'",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "indexlog=indexlog.__main__:main",
        ],
    },
)
