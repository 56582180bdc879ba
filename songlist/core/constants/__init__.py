"""
Constants Module

Contains application constants:
- Application identity
- Project folder conventions (marker suffix, reserved prefix, separator)
- Persisted file names
"""

APP_NAME = "SongList"
APP_ID = "songlist"

# Project folder conventions
MARKER_SUFFIX = ".rpp"              # REAPER project
COMPANION_SUFFIXES = (".gp",)       # Guitar Pro tablature
RESERVED_PREFIX = "__"
NAME_SEPARATOR = " - "

# Persisted files
LOCATION_FILENAME = "location.dat"
CONFIG_FILENAME = "config.json"
LOG_FILENAME = "songlist.log"

# Status texts
SELECT_LOCATION_TEXT = "Select location..."
NO_PROJECTS_TEXT = "No projects found"
