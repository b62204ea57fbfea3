"""
Core enums, exceptions and canonical models for the MediApp client.
"""
