"""
Markup Helpers
==============

Small HTML-generation helpers for server-rendered templates.

This package provides:
- A markup context with tag construction, safe joining and block capture
- Description list helpers that pair humanized labels with record values
- Modal and dropdown builders fed by content-producing callbacks
- Jinja2 integration exposing every helper as a template global
"""

__version__ = "1.0.0"
__author__ = "Markup Helpers Team"
