"""
Core value type, digit-vector arithmetic and payload contracts.

This module contains the foundational building blocks that are independent
of any input/output surface (terminal, JSON requests, etc.).
"""
