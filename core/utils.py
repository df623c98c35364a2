# core/utils.py

"""
Repository for program-wide utilities.
"""

import uuid


def generate_record_id() -> str:
    """Returns a fresh synthetic id for a row in the record store."""
    return uuid.uuid4().hex
