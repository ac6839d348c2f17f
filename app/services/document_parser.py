"""HTML parsing service."""
from bs4 import BeautifulSoup

from app.models.page import PageDocument


class DocumentParser:
    """Turns raw markup into a queryable PageDocument."""

    def __init__(self, features: str = "html.parser"):
        self.features = features

    def parse(self, raw_html: str) -> PageDocument:
        return PageDocument(soup=BeautifulSoup(raw_html, self.features), raw_html=raw_html)
