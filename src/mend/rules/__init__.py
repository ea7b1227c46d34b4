"""Built-in correction rules. Each module exposes one `rule` value."""
