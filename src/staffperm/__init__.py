"""Permission resolution engine for employee roles and per-subject overrides."""

__version__ = "0.1.0"
