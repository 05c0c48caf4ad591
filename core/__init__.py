"""
Core modules for parsing bank transaction notifications.

This package contains:
- config: Application configuration and settings
- exceptions: Custom exception classes
- keywords: Layout keyword vocabulary
- layouts: Per-layout field extractors and record builder
- logger: Logging configuration
- normalize: Amount, date-time and location/tag normalization
- parsing: Line splitting, layout classification and the parse entry point
- schema: Pydantic models for parsed transactions
- validators: Required field checks
"""
