"""Setup configuration for aria-listbox.

Install with:
    pip install -e .

Or, with the test dependencies:
    pip install -e .[test]
"""

from setuptools import setup, find_packages

from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text() if readme_file.exists() else ""

setup(
    name="aria-listbox",
    version="0.1.0",
    description="An accessible single-select listbox widget for urwid",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "urwid>=2.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "aria-listbox=aria_listbox.main:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: User Interfaces",
    ],
)
