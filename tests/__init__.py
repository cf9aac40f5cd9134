"""Test suite for docbot.

Test structure:
- unit/: Unit tests - one module or collaborator in isolation
- integration/: Full documentation runs against a temporary project directory
"""
