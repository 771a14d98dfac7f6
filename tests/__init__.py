"""
Test Suite
==========

Test suite matching the markup_helpers/ package structure.

Test Categories:
- unit: Unit tests for the markup context, helpers and configuration
- integration: Helpers used from Jinja2 templates
"""
