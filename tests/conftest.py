from pathlib import Path

import pytest

SEARCH_LINE_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n'
    '<path d="M18 16"/>\n</svg>\n'
)
SEARCH_FILL_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n'
    '<path d="M11 2"/>\n</svg>\n'
)
HOME_LINE_SVG = '<svg viewBox="0 0 24 24">\r\n<path d="M21 20"/>\r\n</svg>\r\n'


class MockIconSource:
    """
    In-memory icon tree: {category: {filename: content}}.

    Listings come back in reverse insertion order so tests do not depend
    on the order the source happens to return.
    """

    def __init__(self, tree: dict[str, dict[str, str]]) -> None:
        self.tree = tree
        self.reads: list[Path] = []

    def list_categories(self, root: Path) -> list[str]:
        return list(reversed(list(self.tree)))

    def list_files(self, category_dir: Path) -> list[str]:
        return list(reversed(list(self.tree[category_dir.name])))

    def read_text(self, path: Path) -> str:
        self.reads.append(path)
        try:
            return self.tree[path.parent.name][path.name]
        except KeyError:
            raise FileNotFoundError(f"File not found: {path}") from None


@pytest.fixture
def icons_root(tmp_path: Path) -> Path:
    """
    A small icon tree on disk:

    icons/
      ui/search-line.svg, ui/search-fill.svg, ui/preview.png
      buildings/home-line.svg (CRLF line endings)
      README.md
    """
    root = tmp_path / "icons"
    ui = root / "ui"
    buildings = root / "buildings"
    ui.mkdir(parents=True)
    buildings.mkdir()

    (ui / "search-line.svg").write_text(SEARCH_LINE_SVG, encoding="utf-8")
    (ui / "search-fill.svg").write_text(SEARCH_FILL_SVG, encoding="utf-8")
    (ui / "preview.png").write_bytes(b"\x89PNG\r\n")
    (buildings / "home-line.svg").write_bytes(HOME_LINE_SVG.encode("utf-8"))
    (root / "README.md").write_text("not a category", encoding="utf-8")
    return root


@pytest.fixture
def mock_source() -> MockIconSource:
    return MockIconSource(
        {
            "ui": {
                "search-line.svg": SEARCH_LINE_SVG,
                "search-fill.svg": SEARCH_FILL_SVG,
            },
            "buildings": {"home-line.svg": HOME_LINE_SVG},
        }
    )


@pytest.fixture
def make_source() -> type[MockIconSource]:
    """Factory for custom in-memory icon trees."""
    return MockIconSource
