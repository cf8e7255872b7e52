"""
Logging utilities for the parish console backend.

This package provides:
- Structured JSON logging with correlation IDs
- Sensitive data filtering for PII protection
- Context-aware logging with user information
- Security and business event logging
"""
