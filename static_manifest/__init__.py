"""
Generate a static file manifest module for a set of asset directories.

Each discovered file becomes a ``StaticFile`` record holding its original
location, a content-hashed public path and a MIME type.

"""

__version__ = "0.1.0"
