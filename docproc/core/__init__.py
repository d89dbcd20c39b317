"""
docproc core library.

This package contains the core functionality:
- parser: streaming line splitting, tokenizing and document assembly
- summary: aggregate figures over parsed documents
- writer: canonical re-serialization
"""

__all__: list[str] = []
