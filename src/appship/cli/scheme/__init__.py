"""Info.plist URL-scheme commands."""
