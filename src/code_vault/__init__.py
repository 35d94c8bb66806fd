"""Code Vault — explore a GitHub user's repositories from the terminal.

Looks up a profile and its public repositories through a ladder of CORS
relays and a direct request, tallies languages, and lets you search and
filter the result in a Textual TUI.
"""

__version__ = "0.1.0"
