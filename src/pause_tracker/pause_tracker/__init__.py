"""Pause Tracker package.

Feature modules (employees, pauses) with a thin Flask controller layer over
service/repository layers. The shared JSON document is owned by the pause
store; everything else reads it through the store.
"""
