"""
setup.py configuration script for mysql_canal project.

Configuration schema, loader and defaults for a MySQL binlog
change-data-capture client and its mysqldump snapshot step.
"""

from pathlib import Path

from setuptools import find_packages, setup

setup(
    name="mysql_canal",
    version="1.0.0",
    description="Configuration for MySQL binlog change-data-capture clients",
    long_description=Path("README.md").read_text(
        encoding="utf-8"
    ),
    long_description_content_type="text/markdown",
    packages=find_packages(where="./src"),
    package_dir={"": "src/"},
    entry_points={
        "console_scripts": [
            "mysql-canal-config=mysql_canal.cli.main:main",
        ],
    },
    install_requires=[
        "pydantic>=2.0.0",
        "PyYAML>=6.0",
        "tomli>=2.0.0; python_version < '3.11'",
        "tzdata",
        "setuptools",
        "wheel"
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "coverage>=7.0.0",
        ],
        "test": [
            "pytest>=7.0.0",
            "coverage>=7.0.0",
        ],
    },
    python_requires=">=3.9"
)
