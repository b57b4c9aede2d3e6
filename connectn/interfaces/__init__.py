"""
connectn.interfaces - User interfaces for connect-N

This package contains the terminal display and the command line front end.
"""

# Don't import anything here to avoid circular imports
__all__ = []
