"""
Restaurant catalog package.

Responsibilities:
- Define the canonical Restaurant schema consumed by the search core.
- Load the catalog file into memory once and hand it to callers.
- Generate mock restaurants for development and tests.
"""
