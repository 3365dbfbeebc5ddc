import sys
from setuptools import setup, find_packages

# Check for minimum Python version
if sys.version_info < (3, 8):
    sys.exit("Sorry, Python >= 3.8 is required for MiniTensor.")

# Read README for long description
try:
    with open("README.md", encoding="utf-8") as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = "MiniTensor: a small generic tensor library in pure Python. (README not found)"


setup(
    name="minitensor",
    version="0.1.0", # Keep in sync with the fallback in minitensor/__init__.py
    description="A small generic multidimensional tensor with broadcasting, in pure Python",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    # Define the Python package structure (minitensor/tests is not installed)
    packages=find_packages(exclude=("minitensor.tests",)),
    py_modules=["demo"],
    # numpy backs tensor creation from array-likes, .numpy() and repr
    install_requires=["numpy>=1.20"],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "minitensor-demo=demo:main",
        ],
    },
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
)
