"""
services/ - Business Logic Layer
================================
Services combine repositories with password hashing and translate
store-level conflicts into user management errors.
"""
