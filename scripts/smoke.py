# scripts/smoke.py
"""
Smoke Test Script for the Colonnade layout pass.

Usage
-----
1. Run with the built-in sample article:
    $ uv run python scripts/smoke.py

2. Run with a builder export and a strategy:
    $ uv run python scripts/smoke.py --file article.json --strategy flow
"""

import argparse
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv

from colonnade.core.contracts.document import ArticleDocument, parse_document
from colonnade.pipelines.article_layout import run_layout_pass

# --------------------------------------------------------------------------- #
# Environment Setup
# --------------------------------------------------------------------------- #
env_path = Path(".env")
if env_path.exists():
    load_dotenv(env_path)
    print("✅ Loaded .env file")

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

# --------------------------------------------------------------------------- #
# Test Data
# --------------------------------------------------------------------------- #
SAMPLE_ARTICLE = {
    "blocks": [
        {"id": "b1", "type": "title", "content": {"title": "The Harbour at Dawn"}},
        {
            "id": "b2",
            "type": "text",
            "content": {
                "text": "Fishing boats leave **before sunrise** [^log].\n- nets\n- ice",
                "layout": "left_third",
            },
        },
        {"id": "b3", "type": "image", "content": {"position": "right", "caption": "Pier"}},
        {"id": "b4", "type": "quote", "content": {"quote": "The tide decides [^tide]."}},
        {"id": "b5", "type": "text", "content": {"text": "See *the archive* [^missing]."}},
    ],
    "references": [
        {"id": "log", "title": "Harbour Log 1921"},
        {"id": "tide", "title": "Tide Tables"},
    ],
}


def main() -> None:
    """Execute the smoke test workflow."""
    parser = argparse.ArgumentParser(description="Run Colonnade Smoke Test")
    parser.add_argument("--file", "-f", type=str, help="Path to an article document (.json)")
    parser.add_argument("--strategy", "-s", type=str, default=None, help="Layout strategy")
    args = parser.parse_args()

    # 1. Prepare Input Data
    document: ArticleDocument
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            print(f"❌ File not found: {input_path}")
            return
        parsed = parse_document(input_path.read_text(encoding="utf-8"))
        if parsed.is_err():
            print(f"❌ Invalid document: {parsed.unwrap_err()}")
            return
        print(f"\n📂 Using input file: {input_path}")
        document = parsed.unwrap()
    else:
        print("\n📝 Using the sample article (No --file provided)")
        document = ArticleDocument.model_validate(SAMPLE_ARTICLE)

    # 2. Execution Phase
    try:
        print("... Invoking run_layout_pass() ...")
        result = run_layout_pass(document, strategy=args.strategy)
    except Exception as exc:
        print(f"\n❌ Layout Pass Crashed: {exc}")
        traceback.print_exc()
        return

    # 3. Inspection Phase
    print("\n" + "=" * 60)
    print(f"✅ Layout Pass Finished ({result.strategy.value})")
    print("=" * 60)

    items = result.rows or result.sections or result.flow or []
    print(f"\n📐 Layout items: {len(items)}")
    for i, item in enumerate(items, start=1):
        print(f"  {i}. {item.model_dump(include={'kind', 'block_id', 'left_id', 'right_id'})}")

    print("\n📚 References:")
    for entry in result.footer:
        print(f"  [{entry.number}] {entry.reference.title}")
    if result.unresolved:
        print(f"  ⚠️  Unresolved: {', '.join(result.unresolved)}")

    print(f"\n⏱️  Reading time: {result.reading_minutes} min")
    print(f"💾 Record to persist: {result.record.model_dump(by_alias=True)}")


if __name__ == "__main__":
    main()
