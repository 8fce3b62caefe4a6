"""Console formatting, random numbers, IPv4 text conversion and Cortex-M0 core peripheral models."""

__version__ = "0.1.0"