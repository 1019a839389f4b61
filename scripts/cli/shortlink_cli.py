#!/usr/bin/env python3
"""
Command-line client for a running short link service.

Usage:
    python shortlink_cli.py shorten <url>
    python shortlink_cli.py resolve <short_code>
    python shortlink_cli.py stats <short_code>
    python shortlink_cli.py list [--limit N]
    python shortlink_cli.py health
"""

import argparse
import json
import os
import sys
from typing import Any, Dict, Optional

import requests

DEFAULT_BASE_URL = "http://localhost:3000"


class ShortlinkCLI:
    """Command-line interface talking to the HTTP API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 5.0,
    ):
        """Initialize CLI."""
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _print(self, payload: Dict[str, Any], ok: bool) -> int:
        print(json.dumps(payload, indent=2), file=sys.stdout if ok else sys.stderr)
        return 0 if ok else 1

    def _fail(self, response: requests.Response) -> int:
        try:
            error = response.json().get("error")
        except ValueError:
            error = None
        return self._print(
            {"success": False, "status": response.status_code, "error": error or response.reason},
            ok=False,
        )

    def shorten(self, url: str) -> int:
        """Shorten a URL."""
        response = self.session.post(
            f"{self.base_url}/api/shorten",
            json={"originalUrl": url},
            timeout=self.timeout,
        )
        if not response.ok:
            return self._fail(response)
        return self._print({"success": True, **response.json()}, ok=True)

    def resolve(self, short_code: str) -> int:
        """Show where a short code redirects. Counts as a click."""
        response = self.session.get(
            f"{self.base_url}/{short_code}",
            allow_redirects=False,
            timeout=self.timeout,
        )
        if not response.is_redirect:
            return self._fail(response)
        return self._print(
            {"success": True, "short_code": short_code, "original_url": response.headers["location"]},
            ok=True,
        )

    def stats(self, short_code: str) -> int:
        """Get statistics for a short code."""
        response = self.session.get(f"{self.base_url}/api/stats/{short_code}", timeout=self.timeout)
        if not response.ok:
            return self._fail(response)
        return self._print({"success": True, **response.json()}, ok=True)

    def list_urls(self, limit: Optional[int] = None) -> int:
        """List URLs, newest last. ``limit`` keeps only the most recent N."""
        response = self.session.get(f"{self.base_url}/api/urls", timeout=self.timeout)
        if not response.ok:
            return self._fail(response)
        data = response.json()
        urls = data["urls"][-limit:] if limit else data["urls"]
        return self._print(
            {"success": True, "totalUrls": data["totalUrls"], "count": len(urls), "urls": urls},
            ok=True,
        )

    def health(self) -> int:
        """Check service health."""
        response = self.session.get(f"{self.base_url}/api/health", timeout=self.timeout)
        if not response.ok:
            return self._fail(response)
        data = response.json()
        return self._print({"success": data.get("status") == "OK", "health": data}, ok=data.get("status") == "OK")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="URL Shortener CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Shorten a URL
  %(prog)s shorten example.com/long/url

  # Where does a code point to?
  %(prog)s resolve aB3xY9

  # Get statistics
  %(prog)s stats aB3xY9

  # List the 10 most recent URLs
  %(prog)s list --limit 10
        """
    )

    parser.add_argument(
        "--base-url",
        default=os.getenv("SHORTLINK_URL", DEFAULT_BASE_URL),
        help=f"Service base URL (default: from SHORTLINK_URL env or {DEFAULT_BASE_URL})"
    )

    parser.add_argument("--timeout", type=float, default=5.0, help="Request timeout in seconds")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    shorten_parser = subparsers.add_parser("shorten", help="Shorten a URL")
    shorten_parser.add_argument("url", help="URL to shorten")

    resolve_parser = subparsers.add_parser("resolve", help="Show the redirect target (counts a click)")
    resolve_parser.add_argument("short_code", help="Short code to resolve")

    stats_parser = subparsers.add_parser("stats", help="Get URL statistics")
    stats_parser.add_argument("short_code", help="Short code to get stats for")

    list_parser = subparsers.add_parser("list", help="List URLs")
    list_parser.add_argument("--limit", type=int, default=None, help="Only show the N most recent")

    subparsers.add_parser("health", help="Check service health")

    return parser


def main(argv=None, session: Optional[requests.Session] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    cli = ShortlinkCLI(base_url=args.base_url, session=session, timeout=args.timeout)

    try:
        if args.command == "shorten":
            return cli.shorten(args.url)
        elif args.command == "resolve":
            return cli.resolve(args.short_code)
        elif args.command == "stats":
            return cli.stats(args.short_code)
        elif args.command == "list":
            return cli.list_urls(args.limit)
        elif args.command == "health":
            return cli.health()
        else:
            parser.print_help()
            return 1
    except requests.RequestException as e:
        print(json.dumps({"success": False, "error": f"Request failed: {e}"}, indent=2), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
