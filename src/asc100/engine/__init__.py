"""Filtering, tokenization and the encode/decode pipeline."""
