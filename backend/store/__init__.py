"""
DuckDB persistence for named lat/lng rectangles.

Rectangles are stored in their lossless binary encoding, so the table can be
shared with any other implementation of the same format.
"""
