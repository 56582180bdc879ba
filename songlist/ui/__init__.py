"""
UI Module

User interface built on PySide6 + Fluent Widgets.

Structure:
- main_window.py: main window (SongListWindow) and run_app()
- pages/: song table page and song combo page
- widgets/: location bar
"""
