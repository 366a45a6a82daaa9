"""Slack notification dispatch for site analytics."""
