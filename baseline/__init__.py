"""Find the previous released version of a GitHub project."""

__version__ = "0.1.0"
