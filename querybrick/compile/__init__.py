"""Rendering internals: the per-render parameter counter and clause renderers."""
