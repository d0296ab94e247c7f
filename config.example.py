# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "PEANUT_APP_NAME": "App display name (default: peanut).",
    "PEANUT_VERSION": "Version shown in the launch banner (default: package version).",
    "PEANUT_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Paths (gitignored)
    "PEANUT_DATA_DIR": "Local data directory (default: .local/peanut).",
    "PEANUT_DB_PATH": "Task database path (default: <data_dir>/peanut.sqlite3).",
    # Console
    "PEANUT_PAGE_SIZE": "Tasks per list page (default: 10).",
    "PEANUT_LIST_ERRORS_FATAL": "End the session when listing tasks fails (default: true).",
    "PEANUT_RESET_PAGE_ON_FILTER": "Jump back to page 1 when a filter changes (default: false).",
    "PEANUT_SINGLE_KEY_MENUS": "Pick menu entries with a single keystroke (default: true).",
}
