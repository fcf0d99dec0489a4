"""iconkit: build-time SVG icon module generator for Svelte."""

__version__ = "0.1.0"
