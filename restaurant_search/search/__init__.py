"""
Search core.

Responsibilities:
- Decide whether a restaurant matches a query and a filter set.
- Filter a catalog and rank the survivors by relevance.
- Edit filter state through pure helpers (toggle, merge, reset, summarise).
- Explain empty results with titles, messages, suggestions and actions.

Everything here is a pure function over the arguments it receives; nothing
mutates its inputs and nothing touches storage.
"""
