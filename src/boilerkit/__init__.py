"""boilerkit - scaffold a new front-end project from bundled boilerplates."""

__version__ = "0.1.0"
