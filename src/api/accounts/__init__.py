"""Accounts bounded context.

Owns the user-account lifecycle: registration with password confirmation,
profile updates, deletion and password changes for a single ``users``
collection.
"""
