"""Solutions to classic algorithm drills, as functions and a small command-line tool."""

__version__ = "0.1.0"