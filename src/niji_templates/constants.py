from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Delimiters in effect until a template reassigns them.
DEFAULT_START_DELIMITER: str = '{{'
DEFAULT_END_DELIMITER: str = '}}'

# Environment switches.
TRACE_ENV: str = 'NIJI_TEMPLATES_TRACE'
VERSION_ENV: str = 'NIJI_TEMPLATES_VERSION'

# Base logger name; every project logger lives below it.
LOGGER_NAME: str = 'niji_templates'
