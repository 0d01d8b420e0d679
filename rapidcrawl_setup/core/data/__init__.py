"""Static payloads shipped with the wizard."""

from rapidcrawl_setup.core.data.example_template import EXAMPLE_FILENAME, EXAMPLE_SCRIPT

__all__ = ["EXAMPLE_FILENAME", "EXAMPLE_SCRIPT"]
