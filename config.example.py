# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_KEEPER_APP_NAME": "App display name (default: task-keeper).",
    "TASK_KEEPER_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASK_KEEPER_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Durable slot
    "TASK_KEEPER_DATA_DIR": "Local data directory (default: .local/task_keeper).",
    "TASK_KEEPER_STORE_BACKEND": "sqlite (default) or memory (nothing survives exit).",
    "TASK_KEEPER_STORE_DB_PATH": "Slot store SQLite path (default: <data_dir>/storage.sqlite3).",
    "TASK_KEEPER_STORAGE_KEY": "Slot key holding the task list (default: tasks).",
    # Simulated latency, seconds
    "TASK_KEEPER_SAVE_DELAY": "Delay before each save (default: 1.0).",
    "TASK_KEEPER_LOAD_DELAY": "Delay before each view load (default: 1.0).",
    "TASK_KEEPER_DEFERRED_ADD_DELAY": "Delay of /later submissions (default: 2.0).",
}
