"""Parsers and state mapping for describing files, folders, links, groups and system information of Linux hosts."""

__version__ = "0.1.0"