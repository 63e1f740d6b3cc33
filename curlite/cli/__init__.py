"""
CLI Module.

Command-line HTTP client built with Typer and Rich.

Architecture:
- app.py: Typer commands (get, post), argument validation, exit codes
- client.py: async httpx client, one attempt per request
- render.py: status line, headers, body dispatch
- formatters.py: media-type parsing and body formatters

Usage:
    curlite --help
    curlite get https://httpbin.org/get
    curlite post https://httpbin.org/post name=Ann
"""
