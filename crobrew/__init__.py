"""Crobrew — one command line for every native package manager."""

__version__ = "0.1.0"
