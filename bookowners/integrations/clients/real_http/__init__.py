"""
Real HTTP integration clients.

These clients communicate with real external systems via HTTP, i.e. the
upstream book owners API.

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to bookowners/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in bookowners/api/dependencies.py only.
"""
