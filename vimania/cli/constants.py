"""CLI constants."""

DISPLAY_FORMATS = ("json", "yaml")

# Shared by the root app and every domain sub-app
TYPER_SETTINGS = {
    "pretty_exceptions_show_locals": False,
    "pretty_exceptions_enable": False,
    "context_settings": {"help_option_names": ["-h", "--help"]},
    "invoke_without_command": True,
}
