"""
connect_four.interfaces - User interfaces for Connect Four

Terminal front ends that drive a GameSession and render its state.
"""

# Don't import anything here to avoid circular imports
__all__ = []
