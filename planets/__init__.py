"""
Planets - networking core for the Planets client.

Fetches JSON resources from a remote API and decodes them into typed models.

Architecture:
- Each module is self-contained with clear interfaces
- Modules are completely replaceable
- Configuration is injected, never read inside a module

Modules:
- network: Request execution, response validation and decoding
"""

__version__ = "1.0.0"
