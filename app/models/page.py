"""Parsed page model."""
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict


class PageDocument(BaseModel):
    """A fetched page: the parsed tree and the raw markup it came from."""
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    soup: BeautifulSoup
    raw_html: str
