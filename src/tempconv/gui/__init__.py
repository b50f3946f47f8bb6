"""PySide6 desktop form for the Temperature Converter."""
