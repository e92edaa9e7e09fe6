"""Shared helpers for studyday tests."""
