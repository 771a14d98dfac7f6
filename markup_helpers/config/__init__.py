"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Application settings and rendering defaults
- logging: Structured logging configuration
"""
