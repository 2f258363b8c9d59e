"""Input parsers: Showdown export text and record mappings."""

from .records import record_from_mapping, records_from_list
from .smogon import parse_team

__all__ = ["parse_team", "record_from_mapping", "records_from_list"]
