"""Adapters – framework integrations for the webhook gate."""
