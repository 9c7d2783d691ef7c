"""
Setup script for pysatl-binomial.
"""

from setuptools import find_packages, setup

setup(
    name="pysatl-binomial",
    version="0.1.0",
    description="Binomial distribution with validated, mutable parameters",
    author="Leonid Elkin, Mikhail Mikhailov",
    license="MIT",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.12",
    install_requires=[
        "numpy>=1.26",
        "scipy>=1.11",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-cov>=4.1",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.12",
        "License :: OSI Approved :: MIT License",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
)
