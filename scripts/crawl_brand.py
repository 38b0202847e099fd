#!/usr/bin/env python3
"""
Extract a brand profile from a website and print it as JSON

Runs the same extractor as POST /api/crawl without starting the API server.

Usage:
    python3 scripts/crawl_brand.py <url> [options]

Examples:
    python3 scripts/crawl_brand.py example.com
    python3 scripts/crawl_brand.py "https://example.com/about" --save

Options:
    --save      Also store the profile in the Supabase brands table

Environment Variables:
    SUPABASE_URL                Supabase project URL (for --save)
    SUPABASE_SERVICE_ROLE_KEY   Supabase service role key (for --save)
"""

import argparse
import json
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv

from core.brand_extractor import BrandExtractor
from core.brand_store import BrandStore
from core.config import Config
from core.exceptions import BrandStudioError
from core.url_normalizer import URLNormalizer


def main() -> int:
    parser = argparse.ArgumentParser(
        description='Extract a brand profile from a website',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument('url', help='Website URL (https:// is assumed when omitted)')
    parser.add_argument('--save', action='store_true',
                        help='Store the profile in the Supabase brands table')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')

    args = parser.parse_args()

    load_dotenv('.env.local')
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        profile = BrandExtractor().extract(args.url)
        print(json.dumps(profile.to_dict(), indent=2))

        if args.save:
            credentials = Config.load_credentials()
            store = BrandStore(credentials.supabase_url, credentials.supabase_key)
            row = store.save(profile, URLNormalizer.ensure_scheme(args.url))
            print(f"✅ Saved brand with id {row.get('id')}")
    except (BrandStudioError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
