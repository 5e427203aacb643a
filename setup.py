"""
Setup script for the pairwise key derivation package.
"""

from setuptools import setup, find_packages

with open("requirements.txt", "r") as f:
    requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

with open("requirements-dev.txt", "r") as f:
    dev_requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="pairwise-keys",
    version="0.1.0",
    description="Deterministic pairwise RSA and EC key derivation for decentralized identity",
    author="BTP Research Project",
    packages=find_packages(include=["pairwise_keys", "pairwise_keys.*"]),
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": dev_requirements,
        "test": dev_requirements,
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
