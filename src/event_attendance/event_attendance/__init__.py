"""Event Attendance package.

Feature modules (records, events, export, pages) with a thin Flask controller
layer over service/repository layers backed by a single JSON document.
"""
