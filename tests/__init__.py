"""
Test suite for the reqres user scenarios.

This package contains:
- unit/: Offline tests of the model, client, scenarios and runner
- live/: The six ordered scenarios run against the real API
"""
