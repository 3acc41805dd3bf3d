"""CTA rewriter: replaces generic "click here" links with better calls to action."""

__version__ = "0.1.0"
