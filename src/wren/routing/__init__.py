"""Routing — canonical paths, tagged route values, and the route table.

The table is built once from configuration when the app freezes and is
read-only while requests are served.
"""
