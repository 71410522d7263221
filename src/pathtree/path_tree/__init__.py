"""In-memory tree of folders and files addressed by slash-separated paths.

This module provides the node classes, the path normalizer, the PathTree
container and the renderer that turns a tree into box-drawing text.
"""
