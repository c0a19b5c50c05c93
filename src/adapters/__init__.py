"""Adapters: HTTP, graphql-config files and schema persistence."""
