"""
query/ - Query Builder
======================
Turns filter / order / limit criteria into a SELECT statement for a record type.
"""
