# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit credentials embedded in STMTA_MONGO_URI; keep them in .env (gitignored).
"""

ENV_VARS = {
    # Document store
    "STMTA_MONGO_URI": "MongoDB connection URI (default: mongodb://localhost:27017). MONGODB_URI is also accepted.",
    "STMTA_DB_NAME": "Database name (default: todoApp).",
    "STMTA_COLLECTION": "Collection name (default: todos).",
    "STMTA_SERVER_TIMEOUT_MS": "Server selection timeout for the startup ping, in ms (default: 5000).",
    # Logging
    "STMTA_LOG_LEVEL": "Console logging level (default: WARNING).",
    "STMTA_LOG_FILE": "Write a debug log file to the data dir (true/false, default: true).",
    "STMTA_DATA_DIR": "Local data directory for stmta.log (default: ~/.local/stmta).",
}
