"""notion-cli: command-line access to Notion pages, databases and search."""

VERSION = "0.1.0"
