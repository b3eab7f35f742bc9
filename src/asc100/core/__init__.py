"""Charset, marker, packing and version tables."""
