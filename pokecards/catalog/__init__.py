"""
Catalog views over the fetched page: filter/sort pipeline and comparison set.
"""
