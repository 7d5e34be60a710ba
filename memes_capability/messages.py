"""Operator-facing status strings."""

INITIALIZING = "Memes plugin is initializing..."

SYNC_FAILED = "Failed to fetch data from the meme backend, the plugin will not work!"
SYNC_FAILED_NOT_FOUND_HINT = (
    "The backend is likely an old or incompatible meme-generator. "
    "Migrate to meme-generator-rs; see the logs for details."
)
SYNC_FAILED_HINT = (
    "Check the request settings and whether the meme backend is running; "
    "see the logs for details."
)

REGISTRATION_FAILED = (
    "Error while registering plugin commands, the plugin will not work! "
    "See the logs for details."
)

VERSION_WARNING = (
    "Warning: the backend version must be at least {min_version}, "
    "otherwise the plugin may not work properly!"
)
READY = "Plugin initialized, backend version {version}, loaded {count} memes."

# Static command output
LIST_HEADER = "Available memes ({count}):"
LIST_EMPTY = "No memes loaded."
INFO_NOT_FOUND = "Meme '{key}' not found."
INFO_USAGE = "Usage: memes.info <key>"
