"""
Utility functions for resume2ats.
"""

import uuid


def new_id() -> str:
    """Fresh opaque identifier for a resume record."""
    return uuid.uuid4().hex
