"""Setup script for the Phonebook service."""

from setuptools import find_packages, setup

setup(
    name="phonebook",
    version="0.1.0",
    description="Contact records over a small REST API",
    author="Phonebook Team",
    packages=find_packages(include=["phonebook", "phonebook.*"]),
    python_requires=">=3.10",
    install_requires=[
        "fastapi>=0.100.0",
        "pydantic>=2.0.0",
        "python-dotenv>=1.0.0",
        "sqlalchemy>=2.0.0",
        "sqlmodel>=0.0.14",
        "uvicorn>=0.23.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "phonebook=phonebook.main:main",
            "phonebook-cli=phonebook.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
