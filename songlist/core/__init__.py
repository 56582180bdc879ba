"""
Core Module - Application Configuration and Constants

Contains core application components:
- config: Configuration management with JSON storage
- constants: Application constants and defaults
"""
