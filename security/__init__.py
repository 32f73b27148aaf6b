"""
security/ - Credential Handling
===============================
Password hashing for broker users.
"""
