"""
Contracts (data models).

This folder defines the request/response shapes for the book owners integration:
- Owner / Book records as returned by the upstream book owners API
- BookDetail / CategorizedBooks rows returned by our own API
- The abstract source and service interfaces the API layer depends on

Both mock and real HTTP clients should use these contracts.
"""
