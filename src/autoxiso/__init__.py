"""Interactive extract-xiso front end."""

__version__ = "0.1.0"
