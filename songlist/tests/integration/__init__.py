"""
Integration Tests Module

Contains integration tests for component interactions:
- test_cli: headless list/open commands
- test_ui_pages: table and combo pages rendering catalog states
"""
