"""
Shared pytest fixtures for brand_studio_backend tests

This file contains fixtures that are available to all test files.
"""

import pytest
from typing import Callable, Dict
from unittest.mock import Mock

from core.config import Credentials


@pytest.fixture
def sample_pages() -> Dict[str, str]:
    """Sample brand pages for extraction tests"""
    return {
        'acme': (
            '<html><head><meta property="og:site_name" content="Acme Co">'
            '<meta name="theme-color" content="#ff0000"></head>'
            '<body>We are an innovative startup.</body></html>'
        ),
        'full': """
            <!DOCTYPE html>
            <html>
            <head>
                <title>Northwind | Home</title>
                <meta property="og:site_name" content="Northwind Traders">
                <meta property="og:description" content="Specialty foods from around the world">
                <meta name="description" content="Fallback description">
                <meta property="og:image" content="/images/og-logo.png">
                <meta name="keywords" content="food, imports , gourmet">
                <link rel="icon" href="/static/favicon.png">
                <style>
                    :root {
                        --primary-color: #0a3d62;
                        --accent-color: #f6b93b;
                    }
                </style>
            </head>
            <body>
                <h1>Enterprise grade logistics for your business</h1>
                <p>Fun recipes every week.</p>
            </body>
            </html>
        """,
        'bare': '<html><head></head><body><p>Welcome to our store.</p></body></html>',
    }


@pytest.fixture
def make_response() -> Callable[..., Mock]:
    """Build a mock requests.Response"""
    def _make(text: str = '', status_code: int = 200, reason: str = 'OK') -> Mock:
        response = Mock()
        response.text = text
        response.status_code = status_code
        response.reason = reason
        response.ok = 200 <= status_code < 400
        return response
    return _make


@pytest.fixture
def mock_session(make_response) -> Mock:
    """A requests session whose get() returns an empty 200 page"""
    session = Mock()
    session.get.return_value = make_response('<html><body></body></html>')
    return session


@pytest.fixture
def full_credentials() -> Credentials:
    return Credentials(
        openai_api_key='sk-test',
        blotato_api_key='blotato-test',
        supabase_url='https://project.supabase.co',
        supabase_key='service-role-test',
    )


@pytest.fixture
def empty_credentials() -> Credentials:
    return Credentials()
