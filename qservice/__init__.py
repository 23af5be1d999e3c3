"""
Category and post CRUD services.

The question-service exposes hierarchical categories over gRPC
(`qservice.rpc`), the post-service exposes posts over REST (`qservice.api`).
Both share the domain, use case and persistence layers.
"""

__version__ = "1.0.0"
