"""Pure naming rules: variables, templates and sanitization."""
