"""Input table parsing and KRL output formats."""

from kukagen.protocol.table import parse_row, parse_table, read_table

__all__ = ["parse_row", "parse_table", "read_table"]
