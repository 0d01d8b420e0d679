"""
RapidCrawl Setup — interactive bootstrap wizard for the RapidCrawl SDK.

Detects Python, provisions a virtual environment, installs the package,
writes a .env configuration, and generates an example script.
"""

__version__ = "0.1.0"
