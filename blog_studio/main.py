import argparse
import sys
from pathlib import Path

import pandas as pd

from blog_studio.config import config_from_env, load_config
from blog_studio.core.gemini_client import GeminiClient
from blog_studio.core.generator import GenerationSession
from blog_studio.core.logger import log_event, set_log_file
from blog_studio.core.presentation import render_markdown
from blog_studio.core.wordpress_api import WordPressClient
from blog_studio.models.article import ArticleConfig, GenerationStatus
from blog_studio.utils.file_handler import save_draft
from blog_studio.utils.sitemap_store import SitemapStore
from blog_studio.utils.text_cleaner import split_topics


def read_topics(args) -> list:
    topics = []
    for topic in args.topic or []:
        topics.extend(split_topics(topic))
    if args.topics_file:
        topics.extend(split_topics(Path(args.topics_file).read_text(encoding="utf-8")))
    if args.csv:
        df = pd.read_csv(args.csv)
        if "Topic" not in df.columns:
            raise SystemExit(f"{args.csv} has no 'Topic' column")
        topics.extend(str(t).strip() for t in df["Topic"].dropna() if str(t).strip())
    return topics


def cmd_generate(args, config) -> int:
    topics = read_topics(args)
    if not topics:
        print("No topics given.")
        return 2

    store = SitemapStore(config.sitemap_store_path)
    internal_links = store.internal_links()
    configs = [
        ArticleConfig(topic=t, generate_images=not args.no_images, internal_links=internal_links)
        for t in topics
    ]

    session = GenerationSession(
        GeminiClient(config),
        WordPressClient(config),
        on_progress=print,
    )
    state = session.generate(configs)

    for article_config, article in session.completed:
        article_html = render_markdown(article)
        md_path = save_draft(article_config.topic, article, config.drafts_dir)
        save_draft(article_config.topic, article_html, config.drafts_dir, suffix=".html")
        log_event("INFO", "Draft saved", {"path": str(md_path)})
        print(f"Draft saved: {md_path}")

        if args.publish:
            publish_state = session.publish(article_html, article)
            print(publish_state.message)

    if state.status is GenerationStatus.ERROR:
        print(f"Oops! Something went wrong. {state.error}")
        return 1
    return 0


def cmd_save_key(args, config) -> int:
    session = GenerationSession(GeminiClient(config), WordPressClient(config))
    if session.save_api_key(args.api_key):
        print("Saved")
        return 0
    print("Error! Could not save the API key.")
    return 1


def cmd_sitemap(args, config) -> int:
    store = SitemapStore(config.sitemap_store_path)

    if args.action == "add":
        added, errors = store.add_paths(args.files)
        for sitemap in added:
            print(f"Added {sitemap.name} ({len(sitemap.urls)} URLs)")
        if errors:
            print(". ".join(str(e) for e in errors))
        return 1 if errors else 0

    if args.action == "delete":
        if store.delete(args.name):
            print(f"Removed {args.name}")
            return 0
        print(f"No stored sitemap named {args.name}")
        return 1

    for sitemap in store.sitemaps:
        print(f"{sitemap.name}\tAdded: {sitemap.added_date}\t{len(sitemap.urls)} URLs")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blog-studio", description="Generate blog posts with Gemini and publish them to WordPress.")
    parser.add_argument("--config", help="JSON config file (defaults to environment / .env)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one article per topic")
    gen.add_argument("--topic", action="append", help="Topic (repeatable, newlines split topics)")
    gen.add_argument("--topics-file", help="Text file with one topic per line")
    gen.add_argument("--csv", help="CSV file with a 'Topic' column")
    gen.add_argument("--no-images", action="store_true", help="Skip the featured image")
    gen.add_argument("--publish", action="store_true", help="Publish every generated article as a draft post")
    gen.set_defaults(func=cmd_generate)

    key = sub.add_parser("save-key", help="Store the Gemini API key in the WordPress plugin settings")
    key.add_argument("api_key")
    key.set_defaults(func=cmd_save_key)

    sm = sub.add_parser("sitemap", help="Manage sitemaps used for internal links")
    sm_sub = sm.add_subparsers(dest="action", required=True)
    sm_add = sm_sub.add_parser("add")
    sm_add.add_argument("files", nargs="+")
    sm_del = sm_sub.add_parser("delete")
    sm_del.add_argument("name")
    sm_sub.add_parser("list")
    sm.set_defaults(func=cmd_sitemap)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config) if args.config else config_from_env()
    set_log_file(config.log_file)
    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
