"""pkgkeeper - Keep .NET repositories' package references restored and in check."""

__version__ = "0.1.0"
