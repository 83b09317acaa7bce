"""Core domain package for tweetsieve.

Core contains classification, token filtering, and statistics logic without
any filesystem or JSON-specific code, keeping the business logic portable.
"""
