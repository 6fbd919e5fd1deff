"""Setup configuration for the rustdoc-js tester."""

from setuptools import setup, find_packages

setup(
    name="rustdoc-js-tester",
    version="0.1.0",
    description="Runs rustdoc against the rustdoc-js fixtures and checks the search index",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.12",
    install_requires=[
        "pyyaml>=6.0",
        "click>=8.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "rustdoc-js-tester=rustdoc_js_tester.cli:main",
        ],
    },
)
