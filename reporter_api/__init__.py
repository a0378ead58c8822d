"""Membership and news platform API server."""
