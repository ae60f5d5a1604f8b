# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIST_LOG_FILE_ENABLED": "Write full DEBUG logs to <data_dir>/tasklist.log (true/false, default: true).",
    # Connectors
    "TASKLIST_CONSOLE_ENABLED": "Enable console connector (true/false, default: true).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for logs (default: .local/tasklist).",
}
