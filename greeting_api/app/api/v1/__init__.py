"""
Version 1 of the API.

This subpackage bundles all endpoints for the first public version of
the Greeting API.
"""
