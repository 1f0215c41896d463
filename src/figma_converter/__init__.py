"""Convert Figma CSS exports into React components, CSS, HTML and Tailwind classes."""

__version__ = "0.1.0"
