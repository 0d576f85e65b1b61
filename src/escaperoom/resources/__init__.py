"""Bundled data files: default settings and the stock room catalog."""
