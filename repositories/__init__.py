"""
repositories/ - Data Access Layer
==================================
Each collection exposes batch queries over one record type.
Collections build and run SELECT statements and return hydrated record objects.
"""
