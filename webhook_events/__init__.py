"""
webhook_events generates the table of GitHub Actions workflow triggers and their activity types.

The markdown page documenting the triggers is parsed into a syntax tree, the
"Webhook event payload" tables are extracted section by section, and the
result is emitted as a formatted Python module.
"""

__all__ = [
    "config",
    "errors",
    "preprocess",
    "schema",
    "extractor",
    "codegen",
    "orchestrator",
]
