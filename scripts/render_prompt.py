#!/usr/bin/env python3
"""
Render the Gosu prompt for a question from the command line.

Uses the same retrieval augmentor as the API (RETRIEVER_URL in .env), so it is
handy for checking what the service would return without starting uvicorn.

Run from project root:

    python scripts/render_prompt.py "How do I declare a variable?"
    python scripts/render_prompt.py --no-retrieval "How do I declare a variable?"
"""

import argparse
import sys
from pathlib import Path

# Project root on path so "app" resolves
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from app.api.deps import get_prompt_service
from app.services.prompt_service import render_prompt


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the Gosu prompt for a question.")
    parser.add_argument("question", help="Question to place in the Question Section.")
    parser.add_argument(
        "--no-retrieval",
        action="store_true",
        help="Skip the retriever and leave the Content Support Section empty.",
    )
    args = parser.parse_args()

    if args.no_retrieval:
        print(render_prompt(args.question, ""))
        return
    print(get_prompt_service().generate(args.question))


if __name__ == "__main__":
    main()
