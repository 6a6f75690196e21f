"""roverctl — Mars Rover command simulator."""

__version__ = "0.1.0"
