"""Allow ``python -m rapidcrawl_setup``."""

from rapidcrawl_setup.main import cli

if __name__ == "__main__":
    cli()
