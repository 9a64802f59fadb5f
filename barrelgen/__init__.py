"""Static export-graph analysis and barrel file generation for TypeScript sources."""

__version__ = "0.1.0"
