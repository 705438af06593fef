"""Command-line interface for the setup wizard.

Modules:
    - main: ``starter-setup`` entry point and run summary
    - wizard: Interactive prompt sequence
    - styles: Shared console, theme and message helpers

Architecture:
    Uses Click for the entry point, questionary for prompts and rich for
    terminal output.
"""
