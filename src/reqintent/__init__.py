"""Request interpretation and value validation.

The request layer converts a raw request (HTTP method, path, parameters) into a strict
`RequestIntent`. The validator layer checks individual field values against declarative option sets
before they reach business logic.
"""
