"""
HTTP API for the agent permissions playground
"""
