"""Detection of UM981/UM982 GNSS receivers and parsing of their GGA, VTG and HPR output."""

__version__ = "0.1.0"
__all__ = ["detect", "parser"]