"""
Command-line roast report.

Fetches a GitHub user's public activity, runs the roast engine and prints
the result as a report (or JSON with --json). Use --no-llm to skip LLM
enrichment even when a provider key is configured.

Usage:
    python -m gitroast.jobs.roast_report <username> [--json] [--no-llm]
"""

import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from gitroast.crawlers.github.ingestion import GitHubDataUnavailable, GitHubUserNotFound
from gitroast.handler import build_orchestrator

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_UPSTREAM = 2
EXIT_USAGE = 64


def print_report(result: Dict[str, Any]):
    """Print a human-readable roast report."""
    stats = result["stats"]
    print(f"\n{'='*70}")
    print(f"GITHUB ROAST: {result['username']}" + (f" ({result['name']})" if result.get("name") else ""))
    print(f"{'='*70}\n")

    for i, roast in enumerate(result["roasts"], 1):
        print(f"{i}. {roast}")

    print(f"\n{'─'*70}")
    print(f"Commits analyzed:  {stats['commits_analyzed']:>5}")
    print(f"Emoji crimes:      {stats['emoji_crimes']:>5}")
    print(f"Public repos:      {stats['public_repos']:>5}")
    print(f"Followers:         {stats['followers']:>5}")
    print(f"Roasted by:        {'LLM' if stats['using_generative'] else 'built-in rules'}")
    print(f"{'─'*70}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    as_json = "--json" in args
    use_llm = "--no-llm" not in args
    positional = [arg for arg in args if not arg.startswith("--")]

    if len(positional) != 1:
        print(__doc__.strip().splitlines()[-1].strip(), file=sys.stderr)
        return EXIT_USAGE

    orchestrator = build_orchestrator(use_llm=use_llm)
    try:
        result = asyncio.run(orchestrator.run_for_user(positional[0]))
    except GitHubUserNotFound:
        print(f"GitHub user not found: {positional[0]}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except GitHubDataUnavailable as exc:
        print(f"GitHub data unavailable: {exc}", file=sys.stderr)
        return EXIT_UPSTREAM

    if as_json:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    else:
        print_report(result)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
