"""Core domain package for findinclude.

Core contains directive recognition, line scoping, and the recognizer chain
without any editor, filesystem, or terminal code, keeping the matching logic
portable.
"""
