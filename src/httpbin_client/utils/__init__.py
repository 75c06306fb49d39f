"""Shared utilities for the httpbin client."""
