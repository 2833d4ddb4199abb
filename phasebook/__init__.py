"""
Phasebook - Markdown curriculum scanner for a lesson viewer.

Scans a tree of phase folders holding lesson documents and builds the
ordered curriculum model the viewer renders, plus the slug codec that maps
module IDs back to fetchable document filenames.
"""

__version__ = "0.1.0"
