"""Core utilities and shared infrastructure.

- config: Feed configuration and validation
- constants: Feed URL, report layout constants
- exceptions: Custom exception hierarchy
"""
