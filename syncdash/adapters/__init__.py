"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (HTTP transport, the
    authenticated gateway, key-value persistence, NiceGUI notifications, and
    test doubles).

Dependencies:
    Individual submodules depend on ``requests``, ``nicegui``, filesystem
    APIs, and domain protocol definitions.

Call context:
    Imported by ``syncdash.app.main`` (for runtime wiring) and by tests (for
    mocks and transport-level behavior verification).
"""
