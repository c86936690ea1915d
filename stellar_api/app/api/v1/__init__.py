"""
Version 1 of the API.

This subpackage bundles the star and planet endpoints of the Stellar
API.
"""
