"""Product catalog record mapping.

This package converts inbound product requests into persistent product
entities and persisted entities into outbound product responses. Persistence,
request validation and HTTP transport are provided by collaborators.
"""

__version__ = "0.1.0"
