"""docviewer - static design document browser."""
