"""Parsers for nmcli output, Linux interface queries and a loading animation sequencer."""

__version__ = "0.1.0"
__all__ = ["interfaces", "loading", "parsing"]