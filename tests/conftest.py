from pathlib import Path

import pytest

SAMPLE_HTML = """<html><head><title>Sample</title></head>
<body>
<h1>One</h1>
<h1 class="x">Two</h1>
<h1>Three</h1>
<p>First <a href="#a">a</a></p>
<p>Second</p>
<img src="logo.png" alt="logo">
<a href="#b">b</a> <a href="#c">c</a>
<a href="#d">d</a>
</body></html>
"""


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """
    A small site laid out the way previews expect:

        site/style.css
        site/pages/index.html
        site/pages/index.css
        site/pages/about.html
        site/pages/about.css
    """
    root = tmp_path / "site"
    pages = root / "pages"
    pages.mkdir(parents=True)
    (root / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (pages / "index.html").write_text(SAMPLE_HTML, encoding="utf-8")
    (pages / "index.css").write_text("h1 { color: red; }", encoding="utf-8")
    (pages / "about.html").write_text("<html><body><p>About</p></body></html>", encoding="utf-8")
    (pages / "about.css").write_text("p { color: blue; }", encoding="utf-8")
    return root


@pytest.fixture
def shots_dir(tmp_path: Path) -> Path:
    return tmp_path / "out" / "screenshots"
