"""Integration tests for XML to HTML conversion.

These tests run sample documents through the whole engine (parse, classify,
render, pretty-print) and through the CLI down to files on disk, using
temporary directories only.

    pytest tests/integration
"""
