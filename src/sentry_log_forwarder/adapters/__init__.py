"""Adapters – concrete monitoring backends."""
