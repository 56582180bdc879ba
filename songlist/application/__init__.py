"""
Application Layer - Business Logic and Services

This layer implements the use cases of SongList and coordinates between
the UI and Domain layers. All operations are synchronous and run on the
calling thread.

Modules:
- project_catalog: root location persistence, project folder scanning,
  and opening project files with the default applications
"""
