#!/usr/bin/env python3
"""
curlite CLI.

Entry script for running curlite from a source checkout. Installed
copies use the `curlite` console script instead.

Usage:
    python cli.py --help
    python cli.py get https://httpbin.org/get
    python cli.py post https://httpbin.org/post name=Ann age=30
"""

from curlite.cli.app import app

if __name__ == "__main__":
    app()
