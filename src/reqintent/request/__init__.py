"""Request parsing and API version resolution.

The request layer converts a raw request into a strict `RequestIntent`, which routing then uses to
pick a module and scene.
"""
