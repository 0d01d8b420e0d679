"""Language toolchains — python."""

from rapidcrawl_setup.adapters.languages.python import PythonToolchain

__all__ = ["PythonToolchain"]
