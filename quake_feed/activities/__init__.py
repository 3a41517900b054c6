"""Pipeline stage functions.

Each activity performs a single unit of work within the pipeline:
- fetch_feed: Retrieve the GeoJSON feed over HTTP
- decode_feed: Parse the feed body into typed models
- report_quakes: Filter events by magnitude and render the report
"""
