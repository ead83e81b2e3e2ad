"""
Void Skirmish Test Suite.

This package contains automated tests for:
- Unit damage, critical effects, shields and customization
- Attack resolution
- Movement, the scripted opponent and the turn/phase machine
- The JSON API

Run tests with: pytest
"""
