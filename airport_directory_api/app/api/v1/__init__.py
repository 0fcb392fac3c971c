"""
Version 1 of the API.

This subpackage bundles the airport endpoints.  Breaking changes should
be introduced in new version subpackages (e.g. ``v2``).
"""
