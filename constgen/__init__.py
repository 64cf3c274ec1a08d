"""constgen — mirror Unity project settings into C# constant classes."""

__version__ = "0.1.0"
