"""
Restaurant search for the food delivery app.

Responsibilities:
- Match restaurants against a free-text query and structured filters.
- Rank the surviving restaurants deterministically.
- Derive filter summaries and empty-state guidance for the UI.
- Serve the catalog and the search pipeline over HTTP.
"""
