"""
Version 1 of the API.

This subpackage bundles the card endpoints.  Breaking changes to the
wire format should go into a new version subpackage (e.g. ``v2``).
"""
