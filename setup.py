"""
Setup configuration for memoryfile package.
"""

from setuptools import setup, find_packages

setup(
    name="memoryfile",
    version="0.1.0",
    description="In-memory file handles over a growable byte buffer",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pygments>=2.19.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Utilities",
    ],
)
