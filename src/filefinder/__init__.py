"""FileFinder: interactive recursive search for files and directories."""

__version__ = '0.1.0'
