# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Copy the variables you need into `.env` (gitignored); every one of them has a default.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TERMTODO_APP_NAME": "Title shown on the main dialog (default: Rusty To-Do List).",
    "TERMTODO_LOG_LEVEL": "Logging level (default: INFO).",
    # Paths (gitignored)
    "TERMTODO_DATA_DIR": "Local data directory (default: .local/termtodo).",
    "TERMTODO_TASKS_DB_PATH": "Task database SQLite path (default: <data_dir>/tasks.db).",
    "TERMTODO_LOG_DIR": "Directory for termtodo.log (default: <data_dir>).",
    # UI
    "TERMTODO_STARTUP_DELAY": "Seconds the loading bar is shown before the list (default: 5, 0 disables).",
}
