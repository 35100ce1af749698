"""Core library for appship (git helpers, Info.plist scheme editing, config)."""
