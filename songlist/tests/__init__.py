"""
Tests Module

Contains test suites for all application layers:
- unit: Unit tests for individual components
- integration: Integration tests for the CLI and the Qt pages
"""
