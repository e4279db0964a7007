"""Integration tests for archive tools.

These tests run the CLI commands end to end against an in-memory content hub
served through a fake requests session, so the real API wrapper, paginator,
locator, mutator and audit log are exercised together without network access.
"""
