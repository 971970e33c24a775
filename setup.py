"""Setup script for the footprint package.

For development installation:
    pip install -e .[test]

For production installation:
    pip install .
"""

from setuptools import setup

# Read requirements from requirements.txt
with open("requirements.txt") as f:
    requirements = [line.strip() for line in f if line.strip() and not line.startswith("#")]

setup(
    name="footprint",
    version="0.1.0",
    description="Carbon Footprint Monitoring Tool - CO2 emissions statistics per country",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=["footprint"],
    python_requires=">=3.11",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["footprint=footprint.cli:main"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Atmospheric Science",
    ],
)
