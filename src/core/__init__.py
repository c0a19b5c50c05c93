"""Core: settings, domain, interfaces and services. No HTTP or terminal code."""
