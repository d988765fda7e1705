"""
django-blog-cms - A Django blog content-management app.

Features:
- Deterministic slug derivation from titles
- Canonical URL generation for SEO
- Database-enforced slug uniqueness with conflict reporting
- Draft / published workflow
- Media library records for externally hosted uploads
- JSON dashboard API and public blog endpoints
"""

__version__ = "0.1.0"
