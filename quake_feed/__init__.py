"""USGS Significant Earthquake Feed Reporter.

Fetches the USGS significant-earthquakes GeoJSON feed, filters events
by a minimum magnitude, and prints a human-readable report.
"""

__version__ = "0.1.0"
