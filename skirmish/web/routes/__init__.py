"""Blueprints for the web application."""
