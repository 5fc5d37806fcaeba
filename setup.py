from setuptools import setup, find_packages
from pathlib import Path

version = Path("VERSION").read_text().strip()

setup(
    name="templatereview",
    version=version,
    packages=find_packages(include=["templatereview", "templatereview.*"]),
    install_requires=[
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0", "httpx>=0.24.0"],
    },
    entry_points={
        "console_scripts": [
            "templatereview=templatereview.main:main",
        ],
    },
    python_requires=">=3.9",
)
