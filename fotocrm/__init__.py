"""
FotoCRM Catalog

Photo catalog browser with faceted tag filtering and a configurator that
collects photos into buckets, persists them locally and shares them under
a short code.
"""

__version__ = "1.0.0"
