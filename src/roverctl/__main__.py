"""Allow ``python -m roverctl``."""

from roverctl.cli import cli

cli()
