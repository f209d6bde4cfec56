# ABOUTME: Utilities package initialization for the Contentful Management client
# ABOUTME: Contains the HTTP transport, error translation and logging setup

"""
Contentful Management Utilities Package

Shared utilities:
    - http.py: HttpClient with scoping, retries and request helpers
    - errors.py: ContentfulError hierarchy and response translation
    - logging.py: Structured logging with correlation IDs
"""
