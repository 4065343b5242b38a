"""Data types, zoneset configuration parsing and binary helpers for PSENscan laser scanners."""

__version__ = "0.1.0"

__all__ = [
    "configuration",
    "raw_processing",
    "scanner_reply",
    "parameters",
    "xml_parsing",
    "laserscan",
]