"""
appship - build helpers for mobile app projects

Repository-state helpers around git (clean-tree checks, source tarballs,
interactive commits) and URL-scheme editing for iOS Info.plist documents.
"""

__version__ = "0.3.0"
__all__ = ["__version__"]
