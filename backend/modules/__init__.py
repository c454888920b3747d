"""
Feature modules for the Argue backend.

- dilemmas: the built-in case catalog and custom case parsing
- debates: debate sessions, the AI opponent and judge, and persistence

A module exposes its service through interfaces.py; other modules and the
API layer depend on those protocols rather than on concrete classes.
"""
