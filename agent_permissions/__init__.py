"""
Agent permissions playground

Drafts agent-permissions.json documents from a site's robots.txt and a
snapshot of its landing page.
"""

__version__ = "0.1.0"
