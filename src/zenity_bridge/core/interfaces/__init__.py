"""Interfaces of the core.

Defines contracts (Protocol) implemented by concrete adapters.
"""
