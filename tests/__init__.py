"""Test suite for the studyday package.

Unit tests live under unit/<domain>/ and are collected by conftest.py without
a ``test_`` filename prefix. Shared constants and payload builders are in the
helpers/ subpackage.
"""
