from __future__ import annotations

import sys
from pathlib import Path

import pytest
import requests

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head><title>sample</title></head>
<body>
<header id="header"><h1>Site</h1></header>
<div id="x"><span>hi</span></div>
<main id="main"><p class="lead">a &amp; b &lt;c&gt;</p><br><img src="a.png" alt=""></main>
</body>
</html>
"""


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def sample_html_path(tmp_path: Path) -> Path:
    path = tmp_path / "sample.html"
    path.write_text(SAMPLE_HTML, encoding="utf-8")
    return path


class FakeResponse:
    """requests.Response の最小スタブ。"""

    def __init__(self, text: str, status_code: int = 200, content_type: str = "text/html; charset=utf-8"):
        self.text = text
        self.status_code = status_code
        self.headers = {"Content-Type": content_type}
        self.encoding = None
        self.apparent_encoding = "utf-8"

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


@pytest.fixture
def fake_response():
    return FakeResponse
