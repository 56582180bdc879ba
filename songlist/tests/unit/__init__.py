"""
Unit Tests Module

Contains unit tests for individual components:
- test_location_store: root location persistence
- test_catalog: project scanning, name parsing, filtering
- test_launcher: opening project files
- test_config: JSON configuration
- test_runtime: data directories and bootstrap
"""
