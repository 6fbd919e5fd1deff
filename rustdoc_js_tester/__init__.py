"""Runs rustdoc against the rustdoc-js fixtures and checks the output."""

__version__ = "0.1.0"
