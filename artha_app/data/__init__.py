"""
Static instrument data and request parsing module.

Catalog characteristics for each instrument and normalization of raw
comparison payloads into validated projection requests.
"""
