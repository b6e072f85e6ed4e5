"""create-project: scaffold React, Astro, Next.js and Express projects."""

__version__ = "0.1.0"
