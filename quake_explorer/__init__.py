"""Quake Explorer - browse, filter and chart recent USGS earthquakes."""

__version__ = "1.0.0"
