"""Example script written by the wizard's last step."""

EXAMPLE_FILENAME = "rapidcrawl_example.py"

EXAMPLE_SCRIPT = r'''#!/usr/bin/env python3
"""
RapidCrawl Example Script

This script demonstrates basic usage of the RapidCrawl SDK.
"""

from rapidcrawl import RapidCrawlApp
import json

def main():
    # Initialize the client
    app = RapidCrawlApp(debug=True)

    # Example 1: Scrape a single page
    print("\n🔍 Example 1: Scraping a single page...")
    result = app.scrape_url(
        "https://example.com",
        formats=["markdown", "text"]
    )

    if result.success:
        print(f"✅ Scraped successfully!")
        print(f"Title: {result.title}")
        print(f"Content preview: {result.content['text'][:200]}...")
    else:
        print(f"❌ Scraping failed: {result.error}")

    # Example 2: Map a website
    print("\n🗺️  Example 2: Mapping a website...")
    map_result = app.map_url(
        "https://example.com",
        limit=20
    )

    if map_result.success:
        print(f"✅ Found {map_result.total_urls} URLs")
        print("First 5 URLs:")
        for url in map_result.urls[:5]:
            print(f"  - {url}")

    # Example 3: Search the web
    print("\n🔎 Example 3: Searching the web...")
    search_result = app.search(
        "Python web scraping tutorial",
        num_results=5
    )

    if search_result.success:
        print(f"✅ Found {search_result.total_results} results")
        for item in search_result.results:
            print(f"\n{item.position}. {item.title}")
            print(f"   {item.url}")
            print(f"   {item.snippet[:100]}...")

if __name__ == "__main__":
    main()
'''
