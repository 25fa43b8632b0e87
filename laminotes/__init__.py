"""
Laminotes Core

Change reconciliation, access control and invitation lifecycle for
collaborative markdown documents.
"""

__version__ = "1.0.0"
