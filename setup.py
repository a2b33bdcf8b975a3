# setup.py
from setuptools import setup, find_packages

setup(
    name="jsonshape",                 # the *distribution* name on PyPI
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=["pandas"],      # DataFrame row validation (jsonshape.frames)
    extras_require={"test": ["pytest", "numpy"]},
    include_package_data=True,        # so we can bundle the example schemas
    package_data={
        "jsonshape.schemas": ["*.json"],
    },
    entry_points={
        "console_scripts": ["jsonshape = jsonshape.cli:main"],
    },
    description="First-error structural validator for JSON-like data",
    license="Creative Commons Attribution-NonCommercial-ShareAlike 4.0 International License",
)
