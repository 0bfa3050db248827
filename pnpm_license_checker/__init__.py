"""pnpm License Checker - fail builds on dependencies with unsupported licenses."""

__version__ = "0.1.0"
