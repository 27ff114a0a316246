"""Droplet tools, resources and actions."""
