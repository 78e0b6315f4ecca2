"""Render directories of annotated markdown notes into static HTML pages."""
