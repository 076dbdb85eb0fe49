"""Unit test configuration.

Unit tests exercise domain and application code directly; the CLI tests
drive ``main`` with scripted input and in-memory streams.
"""
