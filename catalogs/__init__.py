"""
Catalogs module — static data: orbital-element records and body detail text.
"""
