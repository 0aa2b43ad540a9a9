"""
Version 1 of the API.

Bundles the user and expense endpoints.
"""
