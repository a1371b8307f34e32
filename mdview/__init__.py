"""Multidimensional views over flat buffers with layout mappings and sub-views."""

__version__ = "0.1.0"

__all__ = ["accessor", "extents", "layouts", "slices", "submdspan", "submdspan_extents"]