"""
SEO metadata for public article pages.
"""


def article_metadata(record):
    """
    Build page-head metadata for a published article.

    Args:
        record: ArticleRecord

    Returns:
        Dict with title, description, keywords, canonical URL and the
        Open Graph / Twitter card blocks
    """
    title = record.meta_title or record.title
    description = record.meta_description
    image = record.featured_image

    open_graph_images = []
    twitter_images = []
    if image:
        open_graph_images.append({"url": image.url, "alt": image.alt})
        twitter_images.append(image.url)

    return {
        "title": title,
        "description": description,
        "keywords": list(record.keywords),
        "canonical": record.canonical_url,
        "open_graph": {
            "title": title,
            "description": description,
            "url": record.canonical_url,
            "type": "article",
            "published_time": record.created_at.isoformat(),
            "modified_time": record.updated_at.isoformat(),
            "images": open_graph_images,
        },
        "twitter": {
            "card": "summary_large_image",
            "title": title,
            "description": description,
            "images": twitter_images,
        },
    }
