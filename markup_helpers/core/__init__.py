"""
Core Markup Primitives
======================

Generic building blocks the domain helpers are written on top of.

Modules:
- context: tag construction, safe joining, capture and links
- environment: Jinja2 environment and template rendering
"""
