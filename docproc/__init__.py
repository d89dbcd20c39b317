"""
docproc: parser and validator for document flat files.

A library, CLI and HTTP service that reads "H"/"B"/"C" document files into
validated documents and positions, with line and character statistics.

Usage:
    from docproc.core.parser import process_file
    result = process_file("documents.txt")
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
