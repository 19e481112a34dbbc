"""
Kalorify food photo analysis.

Turns the JSON payload of a remote food analysis webhook into a fully
resolved, localized nutrition report.

Structure:
- domain/: Analysis models, response parser, localization catalog and resolver
- infrastructure/: Webhook HTTP client, configuration, logging
- application/: Use cases wiring transport, parser and resolver
- tests/: Unit test suite
"""

__version__ = "1.0.0"
