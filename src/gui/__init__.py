"""Mood chart GUI layer.

- ``gui.charting``: pure rendering, matplotlib backend, chart registry
- ``gui.app``: Qt hosting shell (``present`` / ``main``)

Importing this package does not import Qt; only ``gui.app`` does.
"""
