"""Docbot - route documentation generator.

Inspects an application's route table and writes Markdown tables, Postman
collections and OpenAPI specifications per route segment.
"""

__version__ = "0.1.0"
