"""
Copyright (c) 2024 Idiap Research Institute, http://www.idiap.ch/
Written by Cem Bilaloglu <cem.bilaloglu@idiap.ch>

This file is part of digital_geometry.
Licensed under the MIT License. See LICENSE file in the project root.
"""

from setuptools import find_packages, setup


# Read version from __init__.py
def get_version():
    with open("src/digital_geometry/__init__.py", "r") as f:
        for line in f:
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip("\"'")
    return "0.0.1"


setup(
    name="digital_geometry",
    version=get_version(),
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        # Core dependencies
        "numpy>=1.21.0",
        "PyYAML>=6.0",
        "pplpy>=0.8",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov",
            "black",
            "flake8",
        ],
    },
    include_package_data=True,
    zip_safe=False,
    description="Exact lattice polytopes and digital geometry on integer grids",
    long_description="""
    Digital Geometry provides exact-arithmetic tools for lattice polytopes,
    i.e. convex sets described by integer half-spaces, and their lattice points.

    This package provides tools for:
    - Half-space representation of lattice polytopes built from points or inequalities
    - Counting and enumerating inside, interior and boundary lattice points
    - Cutting, dilating and shrinking polytopes
    - Pick's formula checks and exact simplex volumes
    - Stern-Brocot tree of irreducible fractions
    - Khalimsky cell covers of lattice point sets
    - Arithmetic digital straight segments and maximal segment estimators
    """,
    long_description_content_type="text/plain",
    author="Cem Bilaloglu",
    author_email="cem.bilaloglu@idiap.ch",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    python_requires=">=3.8",
    keywords="digital-geometry, lattice-polytope, pick, stern-brocot, khalimsky, dss",
)
